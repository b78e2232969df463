"""
Tests for the command-line comparison.
"""

import io
import json

import pytest

from emissions.cli import main

REFERENCE_ARGS = ["--ice-weight", "1750", "--bev-weight", "1900",
                  "--alpha-fuel", "2.7"]


class TestCli:

    def test_text_output(self):
        out = io.StringIO()
        assert main(REFERENCE_ARGS, out=out) == 0
        text = out.getvalue()
        assert "k_ICE: 0.343 kgCO2e/km" in text
        assert "Break-even at" in text
        assert "ICE fuel economy: 7.9 L/100 km" in text

    def test_json_output(self):
        out = io.StringIO()
        assert main(REFERENCE_ARGS + ["--json"], out=out) == 0
        data = json.loads(out.getvalue())
        assert data["break_even_status"] == "finite"
        assert len(data["series"]) == 5

    def test_writes_csv_and_chart(self, tmp_path):
        csv_path = tmp_path / "out.csv"
        png_path = tmp_path / "out.png"
        code = main(REFERENCE_ARGS + ["--csv", str(csv_path),
                                      "--chart", str(png_path)],
                    out=io.StringIO())
        assert code == 0
        assert csv_path.read_text().splitlines()[1] == \
            "0,2555,8854,6299,0.343,0.026,0"
        assert png_path.read_bytes().startswith(b"\x89PNG")

    def test_invalid_input(self, capsys):
        code = main(REFERENCE_ARGS + ["--distances", "abc"], out=io.StringIO())
        assert code == 2
        assert "No valid distances" in capsys.readouterr().err

    def test_weight_required(self):
        with pytest.raises(SystemExit):
            main(["--ice-weight", "1750"])
