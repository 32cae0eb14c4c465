from __future__ import annotations

import hashlib
import logging
import os
import tempfile
import threading
from copy import deepcopy
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, TypeVar
from uuid import uuid4

import orjson

from ..config import get_settings
from ..domain import Label, ListItem, MealPlanningEvent, Recipe, RecipeCollection, ShoppingList
from .credentials import CredentialStore
from .session import Credentials, SessionError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_STATE: Dict[str, Any] = {
    "events": [],
    "labels": [],
    "recipes": [],
    "collections": [],
    "lists": [],
    "metadata": {"schema_version": 1},
}


def _derive_token(email: str, password: str) -> str:
    return hashlib.sha256(f"{email}:{password}".encode("utf-8")).hexdigest()


def _new_identifier() -> str:
    return uuid4().hex


_PATH_LOCKS: Dict[Path, threading.RLock] = {}
_PATH_LOCKS_GUARD = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    # One lock per document so sessions sharing a file serialize their writes.
    key = path.expanduser().resolve()
    with _PATH_LOCKS_GUARD:
        return _PATH_LOCKS.setdefault(key, threading.RLock())


class LocalListSession:
    """List service backed by a JSON document on disk.

    Every read goes back to the document so separate sessions see each
    other's writes. Reads and read-modify-write cycles hold a per-document
    lock, and writes replace the file atomically.
    """

    def __init__(self, credentials: Credentials, *, data_file: Optional[Path] = None) -> None:
        self._credentials = credentials
        self._path = Path(data_file) if data_file else get_settings().anylist.data_file
        self._lock = _lock_for(self._path)
        self._account: Optional[str] = None
        self.meal_planning_labels: List[Label] = []

    @property
    def path(self) -> Path:
        return self._path

    @property
    def account(self) -> Optional[str]:
        return self._account

    # Session lifecycle ---------------------------------------------------
    def login(self, realtime: bool = False) -> None:
        store = CredentialStore(self._credentials.credentials_file)
        if self._credentials.has_explicit_values:
            email = str(self._credentials.email)
            store.save(email, _derive_token(email, str(self._credentials.password)))
            self._account = email
        else:
            self._account = store.load().email
        if realtime:
            logger.info("Local store has no push channel; realtime updates are ignored")
        self._read()
        logger.info("Opened local list store %s for %s", self._path, self._account)

    def teardown(self) -> None:
        self._account = None
        self.meal_planning_labels = []

    # Persistence ----------------------------------------------------------
    def _require_login(self) -> None:
        if self._account is None:
            raise SessionError("Session is not logged in.")

    def _read(self) -> Dict[str, Any]:
        with self._lock:
            if not self._path.exists():
                self._write(DEFAULT_STATE)
                return deepcopy(DEFAULT_STATE)
            raw = self._path.read_bytes()
        if not raw.strip():
            raise SessionError(f"List store {self._path} is empty")
        try:
            state = orjson.loads(raw)
        except orjson.JSONDecodeError as exc:
            raise SessionError(f"List store {self._path} is corrupted") from exc
        if not isinstance(state, dict):
            raise SessionError(f"List store {self._path} is corrupted")
        for key, value in DEFAULT_STATE.items():
            if key not in state:
                state[key] = deepcopy(value)
        return state

    def _write(self, state: Dict[str, Any]) -> None:
        directory = self._path.parent
        directory.mkdir(parents=True, exist_ok=True)
        payload = orjson.dumps(state, option=orjson.OPT_INDENT_2) + b"\n"
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=f".{self._path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
            os.replace(tmp_path, self._path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def _mutate(self, mutator: Callable[[Dict[str, Any]], T]) -> T:
        self._require_login()
        with self._lock:
            state = self._read()
            result = mutator(state)
            self._write(state)
        return result

    @staticmethod
    def _upsert(records: List[Dict[str, Any]], record: Dict[str, Any]) -> None:
        for idx, existing in enumerate(records):
            if existing.get("identifier") == record["identifier"]:
                records[idx] = record
                break
        else:
            records.append(record)

    @staticmethod
    def _remove(records: List[Dict[str, Any]], identifier: Optional[str], kind: str) -> None:
        for idx, existing in enumerate(records):
            if existing.get("identifier") == identifier:
                del records[idx]
                return
        raise SessionError(f"{kind} {identifier} does not exist")

    # Meal planning ------------------------------------------------------
    def _hydrate(self, event: MealPlanningEvent, state: Dict[str, Any]) -> MealPlanningEvent:
        labels = {record.get("identifier"): record for record in state["labels"]}
        recipes = {record.get("identifier"): record for record in state["recipes"]}
        label = labels.get(event.label_id) if event.label_id else None
        recipe = recipes.get(event.recipe_id) if event.recipe_id else None
        event.label = Label.from_record(label) if label else None
        event.recipe = Recipe.from_record(recipe) if recipe else None
        return event

    def get_meal_planning_events(self) -> List[MealPlanningEvent]:
        self._require_login()
        state = self._read()
        self.meal_planning_labels = [Label.from_record(record) for record in state["labels"]]
        return [self._hydrate(MealPlanningEvent.from_record(record), state) for record in state["events"]]

    def save_event(self, event: MealPlanningEvent) -> MealPlanningEvent:
        def _save(state: Dict[str, Any]) -> MealPlanningEvent:
            if event.identifier is None:
                event.identifier = _new_identifier()
            self._upsert(state["events"], event.to_record())
            return self._hydrate(event, state)

        saved = self._mutate(_save)
        logger.debug("Saved event %s", saved.identifier)
        return saved

    def delete_event(self, event: MealPlanningEvent) -> None:
        self._mutate(lambda state: self._remove(state["events"], event.identifier, "Event"))
        logger.debug("Deleted event %s", event.identifier)

    def save_label(self, label: Label) -> Label:
        def _save(state: Dict[str, Any]) -> Label:
            if label.identifier is None:
                label.identifier = _new_identifier()
            if label.sort_index is None:
                label.sort_index = len(state["labels"])
            self._upsert(state["labels"], label.to_record())
            return label

        return self._mutate(_save)

    def delete_label(self, label: Label) -> None:
        def _delete(state: Dict[str, Any]) -> None:
            self._remove(state["labels"], label.identifier, "Label")
            for record in state["events"]:
                if record.get("label_id") == label.identifier:
                    record["label_id"] = None

        self._mutate(_delete)

    # Recipes --------------------------------------------------------------
    def get_recipes(self) -> List[Recipe]:
        self._require_login()
        return [Recipe.from_record(record) for record in self._read()["recipes"]]

    def get_recipe_collections(self) -> List[RecipeCollection]:
        self._require_login()
        return [RecipeCollection.from_record(record) for record in self._read()["collections"]]

    # Shopping lists ---------------------------------------------------------
    def get_lists(self) -> List[ShoppingList]:
        self._require_login()
        return [ShoppingList.from_record(record) for record in self._read()["lists"]]

    @staticmethod
    def _list_record(state: Dict[str, Any], shopping_list: ShoppingList) -> Dict[str, Any]:
        for record in state["lists"]:
            if record.get("identifier") == shopping_list.identifier:
                return record
        raise SessionError(f"List {shopping_list.identifier} does not exist")

    def add_item(self, shopping_list: ShoppingList, item: ListItem) -> ListItem:
        def _add(state: Dict[str, Any]) -> ListItem:
            record = self._list_record(state, shopping_list)
            if item.identifier is None:
                item.identifier = _new_identifier()
            record.setdefault("items", []).append(item.to_record())
            return item

        added = self._mutate(_add)
        shopping_list.items.append(added)
        return added

    def remove_item(self, shopping_list: ShoppingList, item: ListItem) -> None:
        def _remove(state: Dict[str, Any]) -> None:
            record = self._list_record(state, shopping_list)
            self._remove(record.setdefault("items", []), item.identifier, "Item")

        self._mutate(_remove)
        shopping_list.items = [entry for entry in shopping_list.items if entry.identifier != item.identifier]
