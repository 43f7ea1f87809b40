"""Data loading: manifest checks, SHA-256 verification and schema validation.

Every data file is read once; the checksum is taken over the bytes that are
then decoded, so what is parsed is exactly what was verified.
"""

from __future__ import annotations

import hashlib
import json
import logging
import os
from importlib import resources
from pathlib import Path
from typing import Any

import msgpack

from ._errors import ElsChecksumError, ElsDataError, ElsVersionError
from ._types import IslandName, LetterSymbol, Reason, ScoringConstants

logger = logging.getLogger(__name__)

_EXPECTED_VERSION = "1.0"

DATA_DIR_ENV = "ELSFINDER_DATA_DIR"

_DATA_FILES = (
    "letters.bin",
    "aliases.bin",
    "islands.bin",
    "lexicon.bin",
    "constants.bin",
)

_LEXICON_KEYS = ("words", "prefixes", "suffixes")
_CONSTANT_KEYS = ("high_frequency", "cluster_distance", "context_letters")


def _default_data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override)
    return Path(str(resources.files("elsfinder") / "data"))


# -- Manifest and checksums --


def _manifest_checksums(data_dir: Path) -> dict[str, str]:
    """Return filename -> expected SHA-256 after checking the data version."""
    manifest_path = data_dir / "manifest.json"
    if not manifest_path.exists():
        raise ElsDataError(f"manifest.json not found in {data_dir}")
    try:
        manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ElsDataError(f"manifest.json is not valid JSON: {exc}") from exc

    version = manifest.get("version")
    if version != _EXPECTED_VERSION:
        raise ElsVersionError(
            f"Expected data version {_EXPECTED_VERSION!r}, got {version!r}"
        )
    return manifest.get("files", {})


def _read_verified(data_dir: Path, checksums: dict[str, str]) -> dict[str, bytes]:
    payloads: dict[str, bytes] = {}
    for filename in _DATA_FILES:
        filepath = data_dir / filename
        if not filepath.exists():
            raise ElsDataError(f"Missing data file: {filepath}")
        expected = checksums.get(filename)
        if expected is None:
            raise ElsDataError(f"No checksum in manifest for {filename}")
        payload = filepath.read_bytes()
        actual = hashlib.sha256(payload).hexdigest()
        if actual != expected:
            raise ElsChecksumError(
                f"Checksum mismatch for {filename}: "
                f"expected {expected[:16]}..., got {actual[:16]}..."
            )
        payloads[filename] = payload
    return payloads


def _unpack(filename: str, payload: bytes) -> Any:
    try:
        return msgpack.unpackb(payload, raw=False)
    except (msgpack.UnpackException, ValueError) as exc:
        raise ElsDataError(f"{filename} is not valid msgpack: {exc}") from exc


# -- Schema --


def _is_letter(value: Any) -> bool:
    return isinstance(value, str) and len(value) == 1


def _parse_letters(raw: Any) -> list[LetterSymbol]:
    """letters.bin: list of [symbol, weight, [decomposition...]]."""
    if not isinstance(raw, list) or not raw:
        raise ElsDataError("letters.bin must hold a non-empty list")
    letters: list[LetterSymbol] = []
    for row in raw:
        if not (isinstance(row, list) and len(row) == 3):
            raise ElsDataError(f"letters.bin row is not [symbol, weight, decomposition]: {row!r}")
        symbol, weight, decomposition = row
        if not _is_letter(symbol):
            raise ElsDataError(f"letters.bin symbol must be one character: {symbol!r}")
        if not isinstance(weight, int) or isinstance(weight, bool) or weight < 0:
            raise ElsDataError(f"letters.bin weight of {symbol!r} must be a non-negative int")
        if not isinstance(decomposition, list) or not all(map(_is_letter, decomposition)):
            raise ElsDataError(f"letters.bin decomposition of {symbol!r} must list letters")
        letters.append(LetterSymbol(symbol, weight, tuple(decomposition)))
    return letters


def _parse_aliases(raw: Any) -> dict[str, str]:
    """aliases.bin: map of variant form -> base letter."""
    if not isinstance(raw, dict):
        raise ElsDataError("aliases.bin must hold a map")
    for variant, base in raw.items():
        if not (_is_letter(variant) and _is_letter(base)):
            raise ElsDataError(f"aliases.bin entry is not letter -> letter: {variant!r}")
    return raw


def _parse_islands(raw: Any) -> dict[IslandName, list[str]]:
    """islands.bin: list of {name, members}; names must be known islands."""
    if not isinstance(raw, list):
        raise ElsDataError("islands.bin must hold a list")
    islands: dict[IslandName, list[str]] = {}
    for entry in raw:
        if not isinstance(entry, dict) or "name" not in entry or "members" not in entry:
            raise ElsDataError(f"islands.bin entry needs name and members: {entry!r}")
        try:
            name = IslandName(entry["name"])
        except ValueError:
            raise ElsDataError(f"unknown island name {entry['name']!r}") from None
        if name in islands:
            raise ElsDataError(f"island {name.value!r} listed twice")
        members = entry["members"]
        if not isinstance(members, list) or not all(map(_is_letter, members)):
            raise ElsDataError(f"island {name.value!r} members must list letters")
        islands[name] = list(members)
    return islands


def _parse_lexicon(raw: Any) -> dict[str, list[str]]:
    """lexicon.bin: {words, prefixes, suffixes}, normalized later by the engine."""
    if not isinstance(raw, dict):
        raise ElsDataError("lexicon.bin must hold a map")
    lexicon: dict[str, list[str]] = {}
    for key in _LEXICON_KEYS:
        values = raw.get(key, [])
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise ElsDataError(f"lexicon.bin {key!r} must be a list of strings")
        lexicon[key] = values
    return lexicon


def _parse_constants(raw: Any) -> ScoringConstants:
    if not isinstance(raw, dict):
        raise ElsDataError("constants.bin must hold a map")
    for key in _CONSTANT_KEYS:
        if not isinstance(raw.get(key), int):
            raise ElsDataError(f"constants.bin {key!r} must be an int")
    weights: dict[Reason, int] = {}
    for key, value in raw.get("weights", {}).items():
        try:
            weights[Reason(key)] = int(value)
        except ValueError:
            raise ElsDataError(f"Unknown significance tag in constants: {key!r}") from None
    return ScoringConstants(
        high_frequency=raw["high_frequency"],
        cluster_distance=raw["cluster_distance"],
        context_letters=raw["context_letters"],
        weights=weights,
    )


def load_data(data_dir: Path | str | None = None) -> dict[str, Any]:
    """Load and validate all data files, returning a dict of parsed structures.

    Raises:
        ElsVersionError: If the manifest version is not the expected one.
        ElsChecksumError: If a file does not match its manifest checksum.
        ElsDataError: If a file is missing, undecodable or malformed.
    """
    data_dir = _default_data_dir() if data_dir is None else Path(data_dir)

    payloads = _read_verified(data_dir, _manifest_checksums(data_dir))
    raw = {name: _unpack(name, payload) for name, payload in payloads.items()}
    logger.debug("Loading data from %s", data_dir)

    return {
        "letters": _parse_letters(raw["letters.bin"]),
        "aliases": _parse_aliases(raw["aliases.bin"]),
        "islands": _parse_islands(raw["islands.bin"]),
        "lexicon": _parse_lexicon(raw["lexicon.bin"]),
        "constants": _parse_constants(raw["constants.bin"]),
    }
