"""
export.py — Download formats for the current inventory view.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from src.parts import PartRecord
from src.inventory import to_dataframe


def export_csv(records: Iterable[PartRecord]) -> str:
    """CSV of the listed parts. Images are left out."""
    return to_dataframe(records).to_csv(index=False)


def export_markdown(records: Iterable[PartRecord], title: str = "Parts Inventory") -> str:
    records = list(records)
    now = datetime.now().strftime("%Y-%m-%d %H:%M")
    lines = [
        f"# {title}",
        f"**Date:** {now}",
        "",
        "| Part Number | Name | Condition | Category | Price |",
        "|---|---|---|---|---:|",
    ]
    for rec in records:
        name = rec.name.replace("|", "/")
        lines.append(f"| {rec.part_number} | {name[:60]} | {rec.condition} | {rec.category} | {rec.price} |")
    lines.append("")
    lines.append(f"*{len(records)} part(s)*")
    return "\n".join(lines)
