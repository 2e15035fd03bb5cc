"""レポート出力のユニットテスト"""

from datetime import datetime

from src.animal_zoo.infrastructure.report_printer import dump_report


class TestDumpReport:
    """dump_report のテストケース"""

    def test_numbered_lines(self, capsys):
        """1 から番号付けされること"""
        dump_report(["OK", "WARN", "TODO"], now=datetime(2026, 1, 5, 12, 30))

        out = capsys.readouterr().out.splitlines()
        assert out == [
            "REPORT:",
            "1) OK",
            "2) WARN",
            "3) TODO",
            "Generated at: 2026-01-05T12:30:00",
        ]

    def test_empty_report(self, capsys):
        dump_report([], now=datetime(2026, 1, 5))

        out = capsys.readouterr().out.splitlines()
        assert out == ["REPORT:", "Generated at: 2026-01-05T00:00:00"]

    def test_timestamp_defaults_to_now(self, capsys):
        """生成時刻が ISO 8601 形式で出力されること"""
        dump_report(["OK"])

        last_line = capsys.readouterr().out.splitlines()[-1]
        assert last_line.startswith("Generated at: ")
        datetime.fromisoformat(last_line[len("Generated at: "):])
