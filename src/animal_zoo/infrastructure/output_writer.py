"""JSON 出力コンポーネント"""

from typing import Sequence, Union
from pathlib import Path
import json
import logging

from ..domain.models import Animal


class OutputWriter:
    """
    動物リストを JSON 形式のテキストとしてファイルに出力

    Responsibilities:
    - Animal リストのテキスト化 (入力順を保持)
    - ファイルへの一括書き込み
    - 書き込み失敗時のエラーログ出力 (処理は継続)
    """

    def __init__(self):
        """OutputWriter を初期化"""
        self.logger = logging.getLogger(__name__)

    def render(self, animals: Sequence[Animal]) -> str:
        """
        動物リストを JSON 配列テキストに変換

        Args:
            animals: 出力する動物 (順序はそのまま出力に反映)

        Returns:
            str: インデント 2 の JSON 配列 (末尾改行付き)

        Note:
            - 各要素のフィールド順は name, species, legs
            - json.dumps で出力するため name はエスケープされ、空リストは "[]" になる
        """
        records = [
            {
                "name": animal.name,
                "species": animal.species.name,
                "legs": animal.legs,
            }
            for animal in animals
        ]
        return json.dumps(records, ensure_ascii=False, indent=2) + "\n"

    def write(self, path: Union[str, Path], text: str) -> Path:
        """
        テキストをファイルに一括書き込み

        Args:
            path: 出力先パス
            text: 書き込む内容

        Returns:
            Path: 出力ファイルパス

        Raises:
            OSError: 出力先に書き込めない場合
        """
        output_path = Path(path)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(text)
        return output_path

    def save_animals(self, path: Union[str, Path], animals: Sequence[Animal]) -> bool:
        """
        動物リストをファイルに保存

        Args:
            path: 出力先パス
            animals: 出力する動物

        Returns:
            bool: 保存できれば True

        Note: 書き込み失敗時はエラーログのみで処理継続（例外をスローしない）
        """
        try:
            output_path = self.write(path, self.render(animals))
        except OSError as e:
            self.logger.error(f"Problem writing animals: {str(e)}", exc_info=True)
            return False

        self.logger.info(f"Saved animals to {output_path}")
        return True
