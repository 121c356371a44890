"""Sidebar catalogue of levels and topics."""

from __future__ import annotations

from mongodocs.schemas import TopicEntry, TopicGroup


def _group(group_id: str, title: str, entries: list[tuple[str, str, str]]) -> TopicGroup:
    return TopicGroup(
        id=group_id,
        title=title,
        children=[TopicEntry(id=entry_id, title=entry_title, slug=f"{group_id}/{topic}") for entry_id, entry_title, topic in entries],
    )


TOPIC_GROUPS: list[TopicGroup] = [
    _group(
        "basic",
        "Basic Level",
        [
            ("intro", "Introduction to MongoDB", "introduction"),
            ("install", "Installation and Setup", "installation"),
            ("db-basics", "Database and Collection Basics", "database-basics"),
            ("crud", "CRUD Operations", "crud-operations"),
            ("data-types", "Data Types", "data-types"),
            ("basic-query", "Basic Querying", "querying"),
        ],
    ),
    _group(
        "intermediate",
        "Intermediate Level",
        [
            ("adv-query", "Advanced Querying", "advanced-querying"),
            ("indexes", "Indexes", "indexes"),
            ("agg-basics", "Aggregation Framework Basics", "aggregation-basics"),
            ("data-model", "Data Modeling", "data-modeling"),
            ("transactions", "Transactions", "transactions"),
            ("replica-basics", "Replica Sets Basics", "replica-sets"),
            ("perf-opt", "Performance Optimization", "performance"),
        ],
    ),
    _group(
        "advanced",
        "Advanced Level",
        [
            ("adv-agg", "Advanced Aggregation", "aggregation"),
            ("adv-index", "Advanced Indexing", "indexing"),
            ("sharding", "Sharding", "sharding"),
            ("schema-patterns", "Advanced Schema Design Patterns", "schema-patterns"),
            ("security", "Security", "security"),
            ("backup", "Backup and Restore", "backup-restore"),
            ("adv-trans", "Advanced Transactions", "transactions"),
            ("change-streams", "Change Streams", "change-streams"),
        ],
    ),
    _group(
        "super-advanced",
        "Super Advanced Level",
        [
            ("internals", "MongoDB Internals", "internals"),
            ("adv-replication", "Advanced Replication", "replication"),
            ("adv-sharding", "Advanced Sharding Architecture", "sharding-architecture"),
            ("query-opt", "Query Optimization Deep Dive", "query-optimization"),
            ("prod-deploy", "Production Deployment Architecture", "production"),
            ("monitoring", "Monitoring and Diagnostics", "monitoring"),
            ("perf-tuning", "Advanced Performance Tuning", "performance-tuning"),
            ("time-series", "Time Series Collections", "time-series"),
            ("atlas", "Advanced Atlas Features", "atlas"),
            ("data-process", "Advanced Data Processing", "data-processing"),
            ("app-patterns", "Advanced Application Patterns", "app-patterns"),
            ("migration", "Migration and Upgrades", "migration"),
            ("compliance", "Compliance and Governance", "compliance"),
            ("cloud-native", "Cloud-Native MongoDB", "cloud-native"),
            ("cutting-edge", "Cutting-Edge Features", "cutting-edge"),
        ],
    ),
    _group(
        "expert",
        "Expert Level",
        [
            ("core-dev", "MongoDB Internals Development", "core-development"),
            ("troubleshoot", "Advanced Troubleshooting", "troubleshooting"),
            ("custom-solutions", "Custom Solutions", "custom-solutions"),
        ],
    ),
]

LEVELS: tuple[str, ...] = tuple(group.id for group in TOPIC_GROUPS)


def find_topic(level: str, topic: str) -> TopicEntry | None:
    """Look up a catalogue entry by level and topic slug."""
    for group in TOPIC_GROUPS:
        if group.id != level:
            continue
        for entry in group.children:
            if entry.topic == topic:
                return entry
    return None


def topic_title(topic: str) -> str:
    """Derive a display title from a topic slug ("crud-operations" -> "Crud Operations")."""
    return " ".join(word[:1].upper() + word[1:] for word in topic.split("-"))
