"""Bootstrap the message bus, record store and auth store."""

from __future__ import annotations

import functools
import inspect
import logging
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from biaslens import config
from biaslens.adapters.db.engine import make_engine
from biaslens.adapters.id_generators import UUIDv4Generator
from biaslens.adapters.key_value import LocalKeyValueStore, SqlAlchemyKeyValueStore
from biaslens.adapters.password_hasher import Pbkdf2PasswordHasher
from biaslens.adapters.record_store import InMemoryRecordData, InMemoryRecordStore
from biaslens.domain.catalog import RESOURCES
from biaslens.service_layer.auth import AuthStore
from biaslens.service_layer.handlers import COMMAND_HANDLERS
from biaslens.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from biaslens.domain.models import BiasTestTemplate, Resource
    from biaslens.interfaces.key_value_store import KeyValueStore
    from biaslens.interfaces.password_hasher import PasswordHasher
    from biaslens.interfaces.record_store import RecordStore
    from biaslens.service_layer.commands import Command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    store: RecordStore
    message_bus: MessageBus
    auth: AuthStore
    templates: tuple[BiasTestTemplate, ...]
    resources: tuple[Resource, ...]


def build_key_value_store() -> KeyValueStore:
    """Pick the persistent key-value backend from the environment.

    A database is used when ``BIASLENS_DB_URL`` is set; otherwise values are
    kept as files under the data directory.
    """
    if os.environ.get(config.DB_URL_ENV):
        engine = make_engine(config.get_db_url())
        logger.debug("Key-value store: database (%s)", engine.url.get_backend_name())
        return SqlAlchemyKeyValueStore(engine)

    storage_dir = config.get_storage_dir()
    logger.debug("Key-value store: local files in %s", storage_dir)
    return LocalKeyValueStore(storage_dir)


def build_message_bus(
    store: RecordStore,
    command_handlers: Mapping[type[Command], Callable[..., object]],
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {"store": store}
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(
        store,
        command_handlers=injected_command_handlers,
    )


def bootstrap(
    kv_store: KeyValueStore | None = None,
    data: InMemoryRecordData | None = None,
    hasher: PasswordHasher | None = None,
) -> AppContainer:
    """Assemble the application and restore the persisted session.

    Args:
        kv_store: Persistent storage for accounts. Chosen from the
            environment when omitted.
        data: Backing data of the record store. A fresh, empty one is used
            when omitted.
        hasher: Password hasher. PBKDF2 with default settings when omitted.
    """
    store = InMemoryRecordStore(data if data is not None else InMemoryRecordData())
    message_bus = build_message_bus(store, COMMAND_HANDLERS)

    auth = AuthStore(
        storage=kv_store if kv_store is not None else build_key_value_store(),
        hasher=hasher if hasher is not None else Pbkdf2PasswordHasher(),
        id_generator=UUIDv4Generator(),
    )
    auth.load()

    return AppContainer(
        store=store,
        message_bus=message_bus,
        auth=auth,
        templates=tuple(store.get_test_templates()),
        resources=RESOURCES,
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return functools.partial(handler, **deps)
