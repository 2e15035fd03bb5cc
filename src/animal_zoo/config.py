"""実行設定"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ZooConfig(BaseSettings):
    """
    動物園デモの実行設定

    環境変数 (ZOO_ + フィールド名) から読み込み、未設定または空文字列の項目は
    デフォルト値を使用します。

    Raises:
        ValidationError: 数値項目が不正な場合
    """

    model_config = SettingsConfigDict(
        env_prefix="ZOO_",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )

    output_path: str = Field(default="animals.json", description="動物リストの出力先")
    tax_country: str = Field(default="UK", description="税計算の国コード")
    gross: float = Field(default=123.45, description="税計算の総額")
    background_delay_seconds: float = Field(
        default=0.333, ge=0, description="バックグラウンドタスクの遅延 (秒)"
    )
    shutdown_timeout_seconds: float = Field(
        default=1.0, ge=0, description="シャットダウン時の待機上限 (秒)"
    )
