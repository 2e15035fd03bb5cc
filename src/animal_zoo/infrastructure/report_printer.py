"""レポート出力"""

from datetime import datetime
from typing import Iterable, Optional


def dump_report(lines: Iterable[str], now: Optional[datetime] = None) -> None:
    """
    番号付きレポートを標準出力に表示

    Args:
        lines: レポート行 (1 から番号付け)
        now: 生成時刻。None の場合は現在時刻
    """
    print("REPORT:")
    for idx, line in enumerate(lines, start=1):
        print(f"{idx}) {line}")

    generated_at = now or datetime.now()
    print(f"Generated at: {generated_at.isoformat()}")
