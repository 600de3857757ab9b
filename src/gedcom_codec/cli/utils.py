
from __future__ import annotations

import json
import time
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, Dict, List, Tuple

from rich.console import Console

from gedcom_codec.core.exceptions import ExportInputError
from gedcom_codec.models import GedcomFamily, GedcomPerson, ParseResult
from gedcom_codec.parser_core import parse_gedcom

console = Console(stderr=True)


def to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Primitives pass through
    - dataclasses -> dict (recursively)
    - dict -> dict (recursively)
    - list / tuple / set -> list (recursively)
    - Anything else -> str(obj)
    """
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if is_dataclass(obj):
        return {k: to_json_compatible(v) for k, v in asdict(obj).items()}

    if isinstance(obj, dict):
        return {str(k): to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [to_json_compatible(v) for v in obj]

    return str(obj)


def load_gedcom(path: Path, *, verbose: bool = False) -> ParseResult:
    """
    Read and parse a GEDCOM file.
    """
    if not path.exists():
        raise FileNotFoundError(path)

    t0 = time.perf_counter()

    text = path.read_text(encoding="utf-8", errors="replace")
    result = parse_gedcom(text)

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Parsed GEDCOM in {elapsed:.2f}s")

    return result


def load_export_input(path: Path) -> Tuple[List[GedcomPerson], List[GedcomFamily]]:
    """
    Read export input JSON: ``{"people": [...], "families": [...]}``.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ExportInputError(f"{path}: invalid JSON ({exc})") from exc

    if not isinstance(data, dict):
        raise ExportInputError(f"{path}: expected an object with 'people' and 'families'")

    people = [GedcomPerson.from_dict(p) for p in data.get("people") or []]
    families = [GedcomFamily.from_dict(f) for f in data.get("families") or []]
    return people, families


def write_json(
    data: Dict[str, Any],
    *,
    out: Path | None,
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)
