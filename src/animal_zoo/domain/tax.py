"""
国別の簡易税計算

税率と固定加算額を列挙型で保持します。丸め処理は行いません。
"""

from enum import Enum
from typing import Optional


class Country(Enum):
    """国別税率 (rate, surcharge)"""
    UK = (0.20, 0.0)
    FR = (0.19, 3.0)
    OTHER = (0.15, 0.0)

    def __init__(self, rate: float, surcharge: float):
        self.rate = rate
        self.surcharge = surcharge

    def calculate_tax(self, gross: float) -> float:
        """
        税額を計算

        Args:
            gross: 総額

        Returns:
            float: gross * rate + surcharge (丸めなし)
        """
        return gross * self.rate + self.surcharge

    @classmethod
    def from_code(cls, code: Optional[str]) -> "Country":
        """
        国コード文字列を Country に変換

        大文字小文字は区別しません。None および未知のコードは OTHER になります。
        """
        if code is None:
            return cls.OTHER
        normalized = code.upper()
        if normalized in ("UK", "FR"):
            return cls[normalized]
        return cls.OTHER
