"""Compose the command vocabulary legal for a session."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Union

from wdsession.session.exceptions import CommandCollisionError

from .descriptors import CommandDescriptor
from .environment import DriverProfile
from .tables import BASE_TABLES, EXTENSION_TABLES, JSONWIRE_TABLE, WEBDRIVER_TABLE, CommandTable

logger = logging.getLogger(__name__)


def active_tables(profile: DriverProfile) -> List[CommandTable]:
    tables = [WEBDRIVER_TABLE if profile.isW3C else JSONWIRE_TABLE]
    for table in EXTENSION_TABLES:
        if table.flag and getattr(profile, table.flag, False):
            tables.append(table)
    return tables


def compose_tables(tables: Iterable[CommandTable]) -> Dict[str, CommandDescriptor]:
    """
    Additive union of ``tables`` keyed by command name.

    The first table is the base. An extension may replace a base command only
    when it lists the name in ``overrides``; any other shared name raises.
    """
    vocabulary: Dict[str, CommandDescriptor] = {}
    owners: Dict[str, str] = {}
    base_name = None
    for table in tables:
        if base_name is None:
            base_name = table.name
        for name, descriptor in table.commands.items():
            owner = owners.get(name)
            if owner is not None:
                replaces_base = owner == base_name and name in table.overrides
                if not replaces_base:
                    raise CommandCollisionError(
                        f'Command "{name}" is defined by both the "{owner}" and "{table.name}" '
                        "command tables, which are active for the same session."
                    )
            vocabulary[name] = descriptor
            owners[name] = table.name
    return vocabulary


def select_command_vocabulary(
    profile: Union[DriverProfile, Mapping[str, Any]],
) -> Dict[str, CommandDescriptor]:
    """Return ``command name -> CommandDescriptor`` for ``profile``."""
    if not isinstance(profile, DriverProfile):
        profile = DriverProfile.from_flags(profile)
    tables = active_tables(profile)
    vocabulary = compose_tables(tables)
    logger.debug(
        "command vocabulary: tables=%s commands=%d",
        ",".join(table.name for table in tables),
        len(vocabulary),
    )
    return vocabulary


def check_table_compatibility() -> None:
    """Compose every reachable table combination once; raises on the first collision."""
    flags = [table.flag for table in EXTENSION_TABLES if table.flag]
    for base in BASE_TABLES:
        for mask in range(1 << len(flags)):
            enabled = {flag for index, flag in enumerate(flags) if mask & (1 << index)}
            if {"isChromium", "isFirefox"} <= enabled:
                continue
            compose_tables([base] + [t for t in EXTENSION_TABLES if t.flag in enabled])
