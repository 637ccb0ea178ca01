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

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"
DEFAULT_SAVE_FILE = f"tournament{SAVE_FILE_EXTENSION}"
REPORT_FILE_NAME = "tournament_report.html"

# Game outcome scores
WIN_SCORE = 1.0
DRAW_SCORE = 0.5
LOSS_SCORE = 0.0

# A bye is always a full point
BYE_SCORE = 1.0

# Tournament setup limits
MIN_PLAYERS = 2
MIN_ROUNDS = 1
DEFAULT_NUM_ROUNDS = 4
DEFAULT_TOURNAMENT_NAME = "Swiss Tournament"

# Result strings (for display and serialization)
RESULT_WHITE_WIN = "1-0"
RESULT_BLACK_WIN = "0-1"
RESULT_DRAW = "1/2-1/2"
RESULT_PENDING = "PENDING"

# Separators accepted when adding players from a pasted list
PLAYER_LIST_SEPARATORS = r"[\n,]"

# Tiebreaker Keys
TB_BUCHHOLZ = "buchholz"

TIEBREAK_NAMES = {
    TB_BUCHHOLZ: "Buchholz",
}
