"""
Shared Parameter File
=====================
Reads and writes the tab-separated shared parameter definition file a CAD host
uses to create project parameters.

Layout of the file::

    # This is a Revit shared parameter file.
    # Do not edit manually.
    *META	VERSION	MINVERSION
    META	2	1
    *GROUP	ID	NAME
    GROUP	1	FloorEvelation
    *PARAM	GUID	NAME	DATATYPE	DATACATEGORY	GROUP	VISIBLE	DESCRIPTION	USERMODIFIABLE	HIDEWHENNOVALUE
    PARAM	<guid>	SpotElevation_1	LENGTH		1	1		1	0

Lines starting with '*' declare the column names of the rows that follow, so
older files with fewer PARAM columns load as well.
"""
from __future__ import annotations

import logging
import os
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

LENGTH_DATATYPE = "LENGTH"

_HEADER_COMMENT = [
    "# This is a Revit shared parameter file.",
    "# Do not edit manually.",
]
_META_COLUMNS = ["VERSION", "MINVERSION"]
_GROUP_COLUMNS = ["ID", "NAME"]
_PARAM_COLUMNS = [
    "GUID", "NAME", "DATATYPE", "DATACATEGORY", "GROUP",
    "VISIBLE", "DESCRIPTION", "USERMODIFIABLE", "HIDEWHENNOVALUE",
]


class SharedParameterError(ValueError):
    """Malformed shared parameter file, or a required group/definition is missing."""


@dataclass
class ParameterGroup:
    id: int
    name: str


@dataclass
class ParameterDefinition:
    guid: str
    name: str
    datatype: str
    group_id: int
    datacategory: str = ""
    visible: bool = True
    description: str = ""
    user_modifiable: bool = True
    hide_when_no_value: bool = False

    def to_row(self) -> List[str]:
        return [
            "PARAM", self.guid, self.name, self.datatype, self.datacategory,
            str(self.group_id), _flag(self.visible), self.description,
            _flag(self.user_modifiable), _flag(self.hide_when_no_value),
        ]


@dataclass
class SharedParameterFile:
    """In-memory content of a shared parameter file."""
    version: int = 2
    min_version: int = 1
    groups: List[ParameterGroup] = field(default_factory=list)
    definitions: List[ParameterDefinition] = field(default_factory=list)
    path: Optional[str] = None

    # --- Lookup ---------------------------------------------------------

    def group_by_name(self, name: str) -> Optional[ParameterGroup]:
        return next((g for g in self.groups if g.name == name), None)

    def definition(self, group: ParameterGroup, name: str) -> Optional[ParameterDefinition]:
        return next(
            (d for d in self.definitions if d.group_id == group.id and d.name == name),
            None
        )

    def definitions_in(self, group: ParameterGroup) -> List[ParameterDefinition]:
        return [d for d in self.definitions if d.group_id == group.id]

    # --- Creation -------------------------------------------------------

    def ensure_group(self, name: str) -> ParameterGroup:
        """Return the group with this name, creating it with the next free id."""
        group = self.group_by_name(name)
        if group is None:
            next_id = max((g.id for g in self.groups), default=0) + 1
            group = ParameterGroup(id=next_id, name=name)
            self.groups.append(group)
            logger.info(f"Created parameter group '{name}' (id {next_id}).")
        return group

    def ensure_length_parameter(self, group: ParameterGroup, name: str) -> ParameterDefinition:
        """Return the definition with this name in `group`, creating a LENGTH definition if missing."""
        definition = self.definition(group, name)
        if definition is None:
            definition = ParameterDefinition(
                guid=str(uuid.uuid4()),
                name=name,
                datatype=LENGTH_DATATYPE,
                group_id=group.id,
            )
            self.definitions.append(definition)
            logger.info(f"Created length parameter '{name}' in group '{group.name}'.")
        return definition

    # --- Serialization --------------------------------------------------

    def to_text(self) -> str:
        lines = list(_HEADER_COMMENT)
        lines.append("\t".join(["*META"] + _META_COLUMNS))
        lines.append("\t".join(["META", str(self.version), str(self.min_version)]))
        lines.append("\t".join(["*GROUP"] + _GROUP_COLUMNS))
        for group in self.groups:
            lines.append("\t".join(["GROUP", str(group.id), group.name]))
        lines.append("\t".join(["*PARAM"] + _PARAM_COLUMNS))
        for definition in self.definitions:
            lines.append("\t".join(definition.to_row()))
        return "\n".join(lines) + "\n"

    @classmethod
    def from_text(cls, text: str) -> SharedParameterFile:
        spf = cls()
        columns: Dict[str, List[str]] = {}

        for line_no, raw_line in enumerate(text.splitlines(), start=1):
            line = raw_line.rstrip("\r")
            if not line.strip() or line.startswith("#"):
                continue

            cells = line.split("\t")
            kind = cells[0]

            if kind.startswith("*"):
                columns[kind[1:]] = cells[1:]
                continue

            if kind not in columns:
                raise SharedParameterError(f"Line {line_no}: '{kind}' row before its '*{kind}' header.")

            row = dict(zip(columns[kind], cells[1:]))
            try:
                if kind == "META":
                    spf.version = int(row.get("VERSION", spf.version))
                    spf.min_version = int(row.get("MINVERSION", spf.min_version))
                elif kind == "GROUP":
                    spf.groups.append(ParameterGroup(id=int(row["ID"]), name=row["NAME"]))
                elif kind == "PARAM":
                    spf.definitions.append(ParameterDefinition(
                        guid=row["GUID"],
                        name=row["NAME"],
                        datatype=row.get("DATATYPE", ""),
                        group_id=int(row["GROUP"]),
                        datacategory=row.get("DATACATEGORY", ""),
                        visible=row.get("VISIBLE", "1") == "1",
                        description=row.get("DESCRIPTION", ""),
                        user_modifiable=row.get("USERMODIFIABLE", "1") == "1",
                        hide_when_no_value=row.get("HIDEWHENNOVALUE", "0") == "1",
                    ))
                else:
                    logger.debug(f"Line {line_no}: ignoring unknown row type '{kind}'.")
            except (KeyError, ValueError) as e:
                raise SharedParameterError(f"Line {line_no}: malformed {kind} row ({e}).") from e

        return spf

    @classmethod
    def read(cls, path: str) -> SharedParameterFile:
        if not os.path.exists(path):
            raise FileNotFoundError(f"Shared parameter file not found: {path}")

        with open(path, "rb") as f:
            data = f.read()

        # Hosts write these files as UTF-16 with a BOM; hand-edited ones are usually UTF-8
        encoding = "utf-16" if data[:2] in (b"\xff\xfe", b"\xfe\xff") else "utf-8-sig"
        try:
            text = data.decode(encoding)
        except UnicodeDecodeError as e:
            raise SharedParameterError(f"{path}: unreadable encoding ({e}).") from e

        spf = cls.from_text(text)
        spf.path = path
        logger.debug(f"Read {len(spf.groups)} group(s), {len(spf.definitions)} definition(s) from {path}")
        return spf

    def write(self, path: Optional[str] = None) -> None:
        target = path or self.path
        if target is None:
            raise ValueError("No path given and the file was not read from disk.")
        try:
            with open(target, "w", encoding="utf-8", newline="") as f:
                f.write(self.to_text())
        except OSError as e:
            logger.error(f"Failed to write shared parameter file '{target}': {e}")
            raise
        self.path = target
        logger.info(f"Shared parameter file written: {target}")


def _flag(value: bool) -> str:
    return "1" if value else "0"
