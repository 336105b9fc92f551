"""
Game Database.

Handles loading and validation of static battle data (attacks, beasts).

Layout under the data path:
    schemas/attack.schema.json
    schemas/beast.schema.json
    database/attacks/*.json
    database/beasts/*.json

Each JSON file holds a single record or a list of records; every record
needs an "id". Records failing schema validation are skipped.
"""

import json
import logging
from pathlib import Path
from typing import Any

import jsonschema


class Database:
    """
    Central storage for static game data.
    """

    def __init__(self, data_path: Path | str):
        self._data_path = Path(data_path)
        self._schemas: dict[str, Any] = {}

        # Data stores
        self.attacks: dict[str, Any] = {}
        self.beasts: dict[str, Any] = {}

        self.logger = logging.getLogger(__name__)

    @property
    def data_path(self) -> Path:
        return self._data_path

    def load_all(self) -> None:
        """Load all data from disk."""
        self._load_schemas()

        self.attacks = self._load_category("attacks", "attack.schema.json")
        self.beasts = self._load_category("beasts", "beast.schema.json")

        self.logger.info(
            f"Loaded {len(self.attacks)} attacks, "
            f"{len(self.beasts)} beasts."
        )

    def _load_schemas(self) -> None:
        """Load JSON schemas."""
        schema_dir = self._data_path / "schemas"
        if not schema_dir.exists():
            self.logger.warning(f"Schema directory not found: {schema_dir}")
            return

        for schema_file in schema_dir.glob("*.schema.json"):
            try:
                with open(schema_file, 'r') as f:
                    self._schemas[schema_file.name] = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                self.logger.error(f"Failed to load schema {schema_file}: {e}")

    def _load_category(self, folder: str, schema_name: str) -> dict[str, Any]:
        """Load all JSON files in a category folder."""
        category_dir = self._data_path / "database" / folder
        data_store: dict[str, Any] = {}

        if not category_dir.exists():
            self.logger.warning(f"Data directory not found: {category_dir}")
            return data_store

        schema = self._schemas.get(schema_name)
        if not schema:
            self.logger.warning(f"No schema found for {folder} ({schema_name})")
            return data_store

        for file_path in sorted(category_dir.glob("*.json")):
            try:
                with open(file_path, 'r') as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                self.logger.error(f"Failed to load {file_path}: {e}")
                continue

            records = data if isinstance(data, list) else [data]
            for record in records:
                try:
                    jsonschema.validate(instance=record, schema=schema)
                except jsonschema.ValidationError as e:
                    self.logger.error(f"Validation error in {file_path}: {e.message}")
                    continue

                if record['id'] in data_store:
                    self.logger.warning(
                        f"Duplicate {folder} id '{record['id']}' in {file_path}, "
                        f"replacing earlier record"
                    )
                data_store[record['id']] = record

        return data_store

    def get_attack(self, attack_id: str) -> dict[str, Any] | None:
        return self.attacks.get(attack_id)

    def get_beast(self, beast_id: str) -> dict[str, Any] | None:
        return self.beasts.get(beast_id)
