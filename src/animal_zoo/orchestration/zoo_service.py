"""動物園デモのオーケストレーションサービス"""

from typing import List, Optional, Sequence
import logging
from pydantic import BaseModel

from ..config import ZooConfig
from ..domain.factory import create_animal
from ..domain.kennel import Kennel
from ..domain.models import Animal, Species
from ..domain.animals import Dog
from ..domain.tax import Country
from ..infrastructure.output_writer import OutputWriter
from ..infrastructure.report_printer import dump_report
from ..infrastructure.background_scheduler import BackgroundTaskRunner


BACKGROUND_MESSAGE = "[BG] did something probably important"


class ZooRunResult(BaseModel):
    """
    実行結果サマリー

    Attributes:
        animals_created: 生成した動物の数
        tax: 税計算結果
        saved: 動物リストを保存できたか
        output_path: 出力先パス
        kennel_size: 犬舎の犬の数
        background_drained: バックグラウンドタスクが待機中に完了したか
    """
    animals_created: int = 0
    tax: float = 0.0
    saved: bool = False
    output_path: str = ""
    kennel_size: int = 0
    background_drained: bool = False


class ZooService:
    """
    デモ全体のオーケストレーション

    Responsibilities:
    - ファクトリー経由での動物生成と振る舞いの表示
    - バックグラウンドタスクの登録とシャットダウン
    - 税計算・ファイル保存・レポート・犬舎の各処理の呼び出し
    """

    ROSTER = [
        (Species.DOG, "Loki"),
        (Species.CAT, "Ziggy"),
        (Species.RABBIT, "Sooty"),
    ]
    REPORT_LINES = ["OK", "WARN", "TODO"]
    KENNEL_ADDRESS = "Somewhere over there"

    def __init__(
        self,
        config: ZooConfig,
        output_writer: Optional[OutputWriter] = None,
        task_runner: Optional[BackgroundTaskRunner] = None,
    ):
        """
        ZooService を初期化

        Args:
            config: 実行設定
            output_writer: JSON 出力サービス
            task_runner: バックグラウンドタスク実行
        """
        self.config = config
        self.output_writer = output_writer or OutputWriter()
        self.task_runner = task_runner or BackgroundTaskRunner()
        self.logger = logging.getLogger(__name__)

    def run(self) -> ZooRunResult:
        """
        デモを実行

        Returns:
            ZooRunResult: 実行結果サマリー

        Invariants: ファイル保存に失敗しても後続の処理とシャットダウンは実行
        """
        animals = self.create_animals()
        print("Start:")

        self.task_runner.schedule_once(
            self._background_task, self.config.background_delay_seconds
        )

        try:
            self.show_behaviours(animals)

            tax = Country.from_code(self.config.tax_country).calculate_tax(self.config.gross)
            print(f"Tax rough calc: {tax}")

            saved = self.output_writer.save_animals(self.config.output_path, animals)

            dump_report(self.REPORT_LINES)

            kennel = Kennel(self.KENNEL_ADDRESS)
            kennel.add_dog(Dog(name="Buddy"))
            print(f"Kennel has {len(kennel.dogs)} dog(s).")
        finally:
            drained = self.task_runner.shutdown(self.config.shutdown_timeout_seconds)

        return ZooRunResult(
            animals_created=len(animals),
            tax=tax,
            saved=saved,
            output_path=self.config.output_path,
            kennel_size=len(kennel.dogs),
            background_drained=drained,
        )

    def create_animals(self) -> List[Animal]:
        """ROSTER の動物をファクトリー経由で生成"""
        return [create_animal(species, name) for species, name in self.ROSTER]

    def show_behaviours(self, animals: Sequence[Animal]) -> None:
        """各動物の振る舞いを順に表示"""
        for animal in animals:
            animal.speak()
            animal.perform_special_behaviour()
            animal.move()
            animal.eat("food")
            print()

    def _background_task(self) -> None:
        print(BACKGROUND_MESSAGE)
