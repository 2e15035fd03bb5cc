"""
バックグラウンドタスク実行

APScheduler の BackgroundScheduler を単一ワーカーで動かし、遅延付きの
ワンショットタスクを実行します。終了時は「待機してから強制停止」の
2 段階でシャットダウンします。
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Set
import logging
import threading
import uuid

from apscheduler.events import (
    EVENT_JOB_ERROR,
    EVENT_JOB_EXECUTED,
    EVENT_JOB_MISSED,
    JobExecutionEvent,
)
from apscheduler.executors.pool import ThreadPoolExecutor
from apscheduler.jobstores.base import ConflictingIdError
from apscheduler.job import Job
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.date import DateTrigger


class SchedulerClosedError(RuntimeError):
    """シャットダウン開始後にタスクを登録しようとした場合の例外"""


class BackgroundTaskRunner:
    """
    遅延ワンショットタスクの実行とシャットダウン管理

    Responsibilities:
    - 単一ワーカーのスケジューラーへのタスク登録
    - 未完了タスクの追跡 (完了・失敗・実行漏れで完了扱い)
    - タイムアウト付きの待機と、その後の強制停止

    Note: 実行中のタスクを途中でキャンセルすることはできない
    """

    def __init__(self):
        """BackgroundTaskRunner を初期化"""
        self.scheduler = BackgroundScheduler(
            executors={"default": ThreadPoolExecutor(max_workers=1)}
        )
        self.scheduler.add_listener(
            self._on_job_finished,
            EVENT_JOB_EXECUTED | EVENT_JOB_ERROR | EVENT_JOB_MISSED,
        )
        self.logger = logging.getLogger(__name__)
        self._pending: Set[str] = set()
        self._condition = threading.Condition()
        self._closed = False

    @property
    def pending_count(self) -> int:
        """未完了タスク数"""
        with self._condition:
            return len(self._pending)

    def schedule_once(
        self,
        func: Callable[[], None],
        delay_seconds: float,
        job_id: Optional[str] = None,
    ) -> Job:
        """
        タスクを一度だけ遅延実行するよう登録

        Args:
            func: 実行する関数 (引数なし)
            delay_seconds: 実行までの遅延 (秒)
            job_id: ジョブ ID。None の場合は UUID を生成

        Returns:
            Job: 登録されたジョブ

        Raises:
            SchedulerClosedError: shutdown() 開始後に呼ばれた場合
            ConflictingIdError: 未完了のタスクと同じ job_id が指定された場合
        """
        with self._condition:
            if self._closed:
                raise SchedulerClosedError("Scheduler is shutting down, no new tasks accepted")
            job_id = job_id or str(uuid.uuid4())
            if job_id in self._pending:
                raise ConflictingIdError(job_id)
            self._pending.add(job_id)

        run_date = datetime.now(timezone.utc) + timedelta(seconds=delay_seconds)
        try:
            job = self.scheduler.add_job(func, trigger=DateTrigger(run_date=run_date), id=job_id)
            if not self.scheduler.running:
                self.scheduler.start()
        except Exception:
            with self._condition:
                self._pending.discard(job_id)
            raise

        self.logger.info(f"Scheduled background task {job_id} in {delay_seconds}s")
        return job

    def shutdown(self, timeout: float) -> bool:
        """
        2 段階シャットダウン

        1. 新規タスクの受付を止め、登録済みタスクの完了を最大 timeout 秒待機
        2. スケジューラーを待機なしで停止し、残りのタスクを破棄

        Args:
            timeout: 待機の上限 (秒)

        Returns:
            bool: 待機中にすべてのタスクが完了すれば True
        """
        with self._condition:
            self._closed = True
            try:
                drained = self._condition.wait_for(lambda: not self._pending, timeout=timeout)
            except KeyboardInterrupt:
                self._force_stop()
                raise

        if not drained:
            self.logger.warning(
                f"Background tasks did not finish within {timeout}s, forcing shutdown"
            )
        self._force_stop()
        return drained

    def _force_stop(self) -> None:
        """スケジューラーを待機なしで停止"""
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)

    def _on_job_finished(self, event: JobExecutionEvent) -> None:
        """ジョブ完了・失敗・実行漏れイベントで未完了リストから除外"""
        if event.exception is not None:
            self.logger.error(
                f"Background task {event.job_id} failed: {str(event.exception)}",
                exc_info=event.exception,
            )
        elif event.code == EVENT_JOB_MISSED:
            self.logger.warning(f"Background task {event.job_id} missed its run time")

        with self._condition:
            self._pending.discard(event.job_id)
            self._condition.notify_all()
