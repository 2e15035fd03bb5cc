"""CLI エントリーポイント"""

import sys
import logging

from .config import ZooConfig
from .orchestration.zoo_service import ZooService
from .infrastructure.output_writer import OutputWriter
from .infrastructure.background_scheduler import BackgroundTaskRunner


def main():
    """
    CLI エントリーポイント

    Usage:
        python -m animal_zoo

    Exit codes:
        0: 完了 (ファイル保存の失敗はログ出力のみで 0)
        1: 想定外のエラー
    """
    # ロギング設定
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    logger = logging.getLogger(__name__)

    try:
        # 設定を環境変数から読み込み
        config = ZooConfig()

        service = ZooService(
            config=config,
            output_writer=OutputWriter(),
            task_runner=BackgroundTaskRunner()
        )

        result = service.run()

        if not result.saved:
            logger.warning(f"Animals were not saved to {result.output_path}")
        logger.info(
            f"Run completed: "
            f"{result.animals_created} animals, "
            f"kennel size {result.kennel_size}, "
            f"background drained: {result.background_drained}"
        )
        sys.exit(0)

    except Exception as e:
        logger.error(f"Unexpected error: {str(e)}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
