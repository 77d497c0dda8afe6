"""
Unit Tests for plain text ranking export.
"""

from psl_scoreboard.export.text_exporter import (
    export_ranking,
    format_rank_row,
    render_ranking,
)
from psl_scoreboard.models.rank import RankRow
from psl_scoreboard.models.team import Team


class TestTextExporter:
    """Test suite for the export line format and file writing."""

    def test_format_rank_row(self):
        team = Team(name="Mamelodi Sundowns", points=7, goals_for=6, goals_against=2)

        line = format_rank_row(RankRow(rank=1, team=team))

        assert line == "1. Mamelodi Sundowns — 7 pts (GF:6 GA:2 GD:4)"

    def test_negative_goal_difference(self):
        team = Team(name="Tuks", goals_for=1, goals_against=4)

        assert format_rank_row(RankRow(rank=3, team=team)) == "3. Tuks — 0 pts (GF:1 GA:4 GD:-3)"

    def test_render_one_line_per_row(self, seeded_league):
        seeded_league.process_line("Pirates 1, Chiefs 2")

        text = render_ranking(seeded_league.get_ranking())

        assert text == (
            "1. Chiefs — 3 pts (GF:2 GA:1 GD:1)\n"
            "2. Pirates — 0 pts (GF:1 GA:2 GD:-1)\n"
        )

    def test_render_empty(self):
        assert render_ranking([]) == ""

    def test_export_writes_file(self, tmp_path, seeded_league):
        seeded_league.process_line("Pirates 2, Chiefs 2")
        target = tmp_path / "out" / "ranking.txt"

        written = export_ranking(seeded_league.get_ranking(), target)

        assert written == target
        assert target.read_text(encoding="utf-8") == (
            "1. Chiefs — 1 pts (GF:2 GA:2 GD:0)\n"
            "1. Pirates — 1 pts (GF:2 GA:2 GD:0)\n"
        )

    def test_export_accepts_generator(self, tmp_path, seeded_league):
        target = tmp_path / "ranking.txt"

        export_ranking((row for row in seeded_league.get_ranking()), str(target))

        assert len(target.read_text(encoding="utf-8").splitlines()) == 2
