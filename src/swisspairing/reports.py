"""
Read-only projections of a tournament for display and export.
This module builds the standings and pairings tables and the HTML final report.
"""

# Swiss Pairing
# Copyright (C) 2025  Swiss Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from html import escape
from typing import Dict, List, Sequence

from swisspairing.constants import TB_BUCHHOLZ, TIEBREAK_NAMES
from swisspairing.models import Bye, Player, RoundData
from swisspairing.tournament import Tournament
from swisspairing.type_hints import BLACK, WHITE

STANDINGS_HEADERS = ["Rank", "Name", "Score", TIEBREAK_NAMES[TB_BUCHHOLZ]]
PAIRINGS_HEADERS = ["Board", WHITE, BLACK, "Result"]

HTML_STYLE = """
      body { font-family: sans-serif; padding: 20px; }
      h1 { text-align: center; }
      table { border-collapse: collapse; width: 100%; margin-top: 20px; }
      th, td { border: 1px solid #ddd; padding: 8px; }
      thead { background-color: #f2f2f2; }
      tr:nth-child(even) { background-color: #f9f9f9; }
"""


def standings_table(tournament: Tournament) -> List[List[str]]:
    """Standings as display rows: rank, name, score, Buchholz."""
    return [
        [str(row.rank), row.name, f"{row.score:.1f}", f"{row.buchholz:.1f}"]
        for row in tournament.standings()
    ]


def pairings_table(round_data: RoundData, players: Sequence[Player]) -> List[List[str]]:
    """Pairings of one round as display rows; the bye goes last."""
    names: Dict[str, str] = {p.id: p.name for p in players}
    rows = []
    for board, match in enumerate(round_data.matches, start=1):
        result = "" if match.is_pending else match.result.value
        rows.append([str(board), names[match.white_id], names[match.black_id], result])

    bye = round_data.bye
    if isinstance(bye, Bye):
        rows.append(["", names[bye.player_id], "BYE", "1-0"])
    return rows


def format_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Plain-text table with columns padded to their widest cell."""
    widths = [len(h) for h in headers]
    for row in rows:
        widths = [max(w, len(cell)) for w, cell in zip(widths, row)]

    def line(cells: Sequence[str]) -> str:
        return "  ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    separator = "  ".join("-" * w for w in widths)
    return "\n".join([line(headers), separator] + [line(row) for row in rows])


def render_html_report(tournament: Tournament) -> str:
    """Full HTML page with the final standings."""
    body_rows = "\n".join(
        "        <tr>"
        f"<td style=\"text-align: center;\">{rank}</td>"
        f"<td>{escape(name)}</td>"
        f"<td style=\"text-align: center;\">{score}</td>"
        f"<td style=\"text-align: center;\">{buchholz}</td>"
        "</tr>"
        for rank, name, score, buchholz in standings_table(tournament)
    )
    header_cells = "".join(f"<th>{escape(h)}</th>" for h in STANDINGS_HEADERS)
    title = escape(tournament.name)

    return f"""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title} - Final Report</title>
    <style>{HTML_STYLE}    </style>
  </head>
  <body>
    <h1>Final Tournament Standings</h1>
    <h2>{title}</h2>
    <table>
      <thead>
        <tr>{header_cells}</tr>
      </thead>
      <tbody>
{body_rows}
      </tbody>
    </table>
  </body>
</html>
"""
