import random
import time
from datetime import timedelta

from metricsbridge import *
from metricsbridge.telemetry import get_default_logger_provider

# this example reports a fake snapshot to the console every two seconds.


def snapshot() -> MetricsSnapshot:
    requests = random.randint(100, 200)
    return MetricsSnapshot(
        contexts=(
            MetricsContext(
                "web",
                counters=(
                    CounterValueSource(
                        "requests",
                        CounterValue(
                            requests,
                            items=(
                                CounterSetItem("route:/", requests // 2, 50.0, tags={"route": "/"}),
                                CounterSetItem("route:/api", requests - requests // 2, 50.0, tags={"route": "/api"}),
                            ),
                        ),
                        tags={"host": "local"},
                    ),
                ),
                gauges=(GaugeValueSource("memory.used", random.uniform(200, 300)),),
                timers=(
                    TimerValueSource(
                        "latency",
                        TimerValue(
                            rate=MeterValue(count=requests, mean_rate=requests / 60),
                            histogram=HistogramValue(count=requests, mean=12.5, max=80.0, min=1.2),
                        ),
                    ),
                ),
            ),
        )
    )


if __name__ == "__main__":
    options = ReporterOptions(
        "local-key",
        flush_interval=timedelta(seconds=2),
        exporter=ConsoleTelemetryExporter(),
        batch=False,
    )
    with MetricsReporter(options, logger_provider=get_default_logger_provider()) as reporter:
        subscription = schedule_reports(reporter, snapshot)
        try:
            while True:
                time.sleep(1)
        except KeyboardInterrupt:
            print("\nKeyboard Interrupt.")
        finally:
            subscription.dispose()
