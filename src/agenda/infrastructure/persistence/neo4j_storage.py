"""Neo4j implementation of KeyValueStorage.
Each key is one (:StorageItem {key, value}) node; values are opaque strings.
"""


def ensure_storage_constraint(driver: object) -> None:
    """Create the uniqueness constraint on StorageItem.key. Idempotent."""
    with driver.session() as session:
        session.run(
            """
            CREATE CONSTRAINT storage_item_key IF NOT EXISTS
            FOR (s:StorageItem) REQUIRE s.key IS UNIQUE
            """
        )


class Neo4jStorage:
    """Stores values on StorageItem nodes, optionally scoped by namespace."""

    def __init__(self, driver: object, namespace: str = "default") -> None:
        self._driver = driver
        self._namespace = namespace

    def _node_key(self, key: str) -> str:
        return f"{self._namespace}:{key}"

    def get_item(self, key: str) -> str | None:
        with self._driver.session() as session:
            record = session.run(
                "MATCH (s:StorageItem {key: $key}) RETURN s.value AS value",
                key=self._node_key(key),
            ).single()
        if record is None:
            return None
        return record["value"]

    def set_item(self, key: str, value: str) -> None:
        with self._driver.session() as session:
            session.run(
                "MERGE (s:StorageItem {key: $key}) SET s.value = $value",
                key=self._node_key(key),
                value=value,
            )

    def remove_item(self, key: str) -> None:
        with self._driver.session() as session:
            session.run(
                "MATCH (s:StorageItem {key: $key}) DELETE s",
                key=self._node_key(key),
            )
