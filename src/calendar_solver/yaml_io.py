from pathlib import Path

import yaml

from .types import Cell, Piece, Puzzle


def _coerce_int(value: object, *, label: str) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{label} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise ValueError(
                f"{label} invalid integer string: {value!r}"
            ) from None
    raise TypeError(f"{label} must be an int, got {type(value).__name__}")


def _coerce_row_lengths(values: object, *, label: str) -> tuple[int, ...]:
    if not isinstance(values, (list, tuple)) or not values:
        raise TypeError(f"{label} must be a non-empty list")
    out: list[int] = []
    for i, v in enumerate(values):
        n = _coerce_int(v, label=f"{label}[{i}]")
        if n <= 0:
            raise ValueError(f"{label}[{i}] must be positive, got {n}")
        out.append(n)
    return tuple(out)


def _coerce_cells(values: object, *, label: str) -> tuple[Cell, ...]:
    if not isinstance(values, (list, tuple)) or not values:
        raise TypeError(f"{label} must be a non-empty list")
    out: list[Cell] = []
    for i, v in enumerate(values):
        if not isinstance(v, (list, tuple)) or len(v) != 2:
            raise ValueError(f"{label}[{i}] must be a [row, col] pair")
        out.append(
            (
                _coerce_int(v[0], label=f"{label}[{i}][0]"),
                _coerce_int(v[1], label=f"{label}[{i}][1]"),
            )
        )
    if len(set(out)) != len(out):
        raise ValueError(f"{label} contains duplicate cells")
    return tuple(out)


def _parse_piece(item: object, *, label: str) -> Piece:
    if not isinstance(item, dict):
        raise ValueError(f"{label} must be a mapping")
    piece_id = _coerce_int(item.get("id"), label=f"{label}.id")
    if piece_id <= 0:
        raise ValueError(f"{label}.id must be positive, got {piece_id}")
    cells = _coerce_cells(item.get("cells"), label=f"{label}.cells")
    color = item.get("color", "#c0c0c0")
    if not isinstance(color, str):
        raise TypeError(f"{label}.color must be a string")
    name = item.get("name", "")
    if not isinstance(name, str):
        raise TypeError(f"{label}.name must be a string")
    return Piece(piece_id, cells, color, name)


def load_puzzle_yaml(path: str | Path) -> Puzzle:
    """Load a puzzle definition (board rows, pieces, labels) from YAML."""
    path = Path(path)
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError("YAML root must be a mapping")

    row_lengths = _coerce_row_lengths(raw.get("rows"), label="rows")

    pieces_node = raw.get("pieces")
    if not isinstance(pieces_node, list) or not pieces_node:
        raise ValueError("YAML must contain a non-empty list 'pieces'")
    pieces = [
        _parse_piece(item, label=f"pieces[{idx}]")
        for idx, item in enumerate(pieces_node)
    ]
    ids = [p.id for p in pieces]
    if len(set(ids)) != len(ids):
        raise ValueError("Piece ids must be unique")

    months_node = raw.get("months", [])
    if not isinstance(months_node, list) or not all(
        isinstance(m, str) for m in months_node
    ):
        raise TypeError("months must be a list of strings")

    reserved_count = _coerce_int(
        raw.get("reservedCount", 2), label="reservedCount"
    )

    name = raw.get("name", path.stem)
    if not isinstance(name, str) or not name:
        raise ValueError("name must be a non-empty string")

    return Puzzle(
        row_lengths=row_lengths,
        pieces=tuple(pieces),
        months=tuple(months_node),
        reserved_count=reserved_count,
        name=name,
    )


def dump_puzzle_yaml(puzzle: Puzzle) -> str:
    """Construct a YAML document (as string) from a puzzle."""
    doc = {
        "version": 1,
        "name": puzzle.name,
        "rows": list(puzzle.row_lengths),
        "reservedCount": puzzle.reserved_count,
        "months": list(puzzle.months),
        "pieces": [
            {
                "id": p.id,
                "name": p.name,
                "color": p.color,
                "cells": [[r, c] for r, c in p.cells],
            }
            for p in sorted(puzzle.pieces, key=lambda x: x.id)
        ],
    }
    return yaml.safe_dump(doc, sort_keys=False, default_flow_style=None)


def write_puzzle_yaml(
    path: str | Path, puzzle: Puzzle, *, overwrite: bool = False
) -> None:
    p = Path(path)
    if p.exists() and not overwrite:
        raise FileExistsError(f"Refusing to overwrite existing file: {p}")
    p.write_text(dump_puzzle_yaml(puzzle), encoding="utf-8")
