"""
インフラストラクチャ層

ファイル出力、レポート表示、バックグラウンドタスク実行を提供します。
"""

from .output_writer import OutputWriter
from .report_printer import dump_report
from .background_scheduler import BackgroundTaskRunner, SchedulerClosedError

__all__ = ["OutputWriter", "dump_report", "BackgroundTaskRunner", "SchedulerClosedError"]
