# utils/io.py
import json
import os
from dataclasses import fields
from typing import Dict, List, Optional, Sequence

from rota.model import ConfigurationError, Params

SECTION_HEADERS = {
    "[stations]": "stations",
    "[timeslots]": "timeslots",
    "[times]": "timeslots",
    "[individuals]": "individuals",
    "[people]": "individuals",
}


def ensure_dir(path: str):
    if path:
        os.makedirs(path, exist_ok=True)


def parse_sections(text: str) -> Dict[str, List[str]]:
    """
    Split a sectioned list into stations / timeslots / individuals.
    Headers are matched case-insensitively; blank lines and lines before the
    first header are skipped. Entries are kept verbatim.
    """
    sections = {"stations": [], "timeslots": [], "individuals": []}
    mode = None
    for line in text.splitlines():
        if not line:
            continue
        header = SECTION_HEADERS.get(line.lower())
        if header is not None:
            mode = header
            continue
        if mode is not None:
            sections[mode].append(line)
    return sections


def read_input(path: str) -> Dict[str, List[str]]:
    with open(path, "r", encoding="utf-8") as f:
        return parse_sections(f.read())


def format_schedule(snapshot: Dict[str, Dict[str, Optional[str]]], unassigned: Sequence[str]) -> str:
    out = []
    for station, row in snapshot.items():
        out.append(f"[Station: {station}]\n")
        for timeslot, individual in row.items():
            out.append(f"{timeslot}: {individual if individual is not None else 'None'}\n")
        out.append("\n")
    out.append("[Unassigned]\n")
    for i in unassigned:
        out.append(f"{i}\n")
    return "".join(out)


def write_schedule(path: str, text: str):
    ensure_dir(os.path.dirname(path))
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def load_params(path: str, **overrides) -> Params:
    """Params from a JSON file (keys override defaults), then keyword overrides."""
    values = {}
    if path:
        with open(path, "r", encoding="utf-8") as f:
            values = json.load(f)
        if not isinstance(values, dict):
            raise ConfigurationError(f"{path}: expected a JSON object")
    values.update({k: v for k, v in overrides.items() if v is not None})

    known = {f.name for f in fields(Params)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ConfigurationError(f"unknown params: {', '.join(unknown)}")
    return Params(**values)
