"""Rx operators driving a reporter from a stream of snapshots."""

import threading
from collections.abc import Callable
from typing import Optional

import reactivex as rx
from reactivex import Observable
from reactivex import operators as ops
from reactivex.disposable import CompositeDisposable, Disposable

from .reporter import Cancellation, MetricsReporter
from .sources import MetricsSnapshot


def flush_to(reporter: MetricsReporter, cancellation: Cancellation | None = None):
    """
    Flush every snapshot of the source into ``reporter`` and forward the result.

    Errors raised by the reporter (e.g. a failing backend) are sent downstream
    as ``on_error``.
    """

    def _flush_to(source):
        def subscribe(observer, scheduler=None):
            def on_next(snapshot: MetricsSnapshot | None) -> None:
                try:
                    result = reporter.flush(snapshot, cancellation)
                except Exception as e:
                    observer.on_error(e)
                    return
                observer.on_next(result)

            return source.subscribe(
                on_next=on_next,
                on_error=observer.on_error,
                on_completed=observer.on_completed,
                scheduler=scheduler,
            )

        return Observable(subscribe)

    return _flush_to


def schedule_reports(
    reporter: MetricsReporter,
    snapshot_provider: Callable[[], MetricsSnapshot | None],
    scheduler: Optional[rx.abc.SchedulerBase] = None,
    on_error: Callable[[Exception], None] | None = None,
) -> rx.abc.DisposableBase:
    """
    Flush a fresh snapshot into ``reporter`` every ``reporter.flush_interval``.

    Returns a disposable that stops the timer. Disposing also sets the
    cancellation event, so a tick already in flight exports nothing.

    Example:
        >>> subscription = schedule_reports(reporter, registry.snapshot)
        >>> ...
        >>> subscription.dispose()
    """
    cancelled = threading.Event()
    subscription = (
        rx.interval(reporter.flush_interval, scheduler=scheduler)
        .pipe(
            ops.map(lambda _: snapshot_provider()),
            flush_to(reporter, cancelled),
        )
        .subscribe(on_error=on_error, scheduler=scheduler)
    )
    return CompositeDisposable(Disposable(cancelled.set), subscription)
