# Analyzer hook: persists this build's snapshot and reports changes against
# the previous build's snapshot.
#
# Lifecycle (on_analysis):
#   1. Only the first call per hook instance does anything; analyzers may
#      fire the callback once per output chunk of a single build.
#   2. Outside CI the call is a no-op beyond counting.
#   3. In CI, the current snapshot write is submitted to a background worker
#      and not waited on.  A failed write is reported to the diagnostics
#      console from the worker thread.
#   4. The previous snapshot is read; if missing or invalid, one diagnostic
#      line is printed and the comparison is skipped.
#   5. Otherwise the size change report is written to the output console.

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from types import TracebackType

from result import Err
from rich.console import Console

from sizeguard.config.defaults import default_config
from sizeguard.config.env import AnalyzerOptions, analyzer_options, is_ci
from sizeguard.config.schema import ReportConfig
from sizeguard.models.analysis import SizeAnalysis, SnapshotWriteResult
from sizeguard.services.formatting import print_plain
from sizeguard.services.fs import DEFAULT_FS, FileSystem
from sizeguard.services.report import emit_report
from sizeguard.services.snapshot import SnapshotPaths, read_snapshot, resolve_snapshot_paths, write_snapshot


@dataclass(slots=True)
class HookContext:
    """Per-hook state handed to the analysis callback."""

    package_dir: str
    config: ReportConfig
    ci: bool
    invocations: int = 0

    def claim_first_run(self) -> bool:
        self.invocations += 1
        return self.invocations == 1


class SizeChangeHook:
    def __init__(
        self,
        package_dir: str,
        *,
        config: ReportConfig | None = None,
        ci: bool | None = None,
        fs: FileSystem = DEFAULT_FS,
        console: Console | None = None,
        diagnostics: Console | None = None,
    ) -> None:
        self.context = HookContext(
            package_dir=package_dir,
            config=config or default_config(),
            ci=is_ci() if ci is None else ci,
        )
        self._fs = fs
        self._console = console or Console()
        self._diagnostics = diagnostics or Console(stderr=True)
        self._executor: ThreadPoolExecutor | None = None
        self._pending: list[Future[SnapshotWriteResult]] = []

    @property
    def options(self) -> AnalyzerOptions:
        return analyzer_options(self.context.ci)

    def paths(self) -> SnapshotPaths:
        return resolve_snapshot_paths(self.context.package_dir, self.context.config, self._fs)

    def on_analysis(self, analysis: SizeAnalysis) -> None:
        if not self.context.claim_first_run():
            return
        if not self.context.ci:
            return

        paths = self.paths()
        self._submit_write(paths.current, analysis)

        previous = read_snapshot(paths.previous, self._fs)
        if isinstance(previous, Err):
            print_plain(self._diagnostics, f"No previous bundle analysis found: {previous.unwrap_err().message}")
            return
        emit_report(self._console, previous.unwrap(), analysis, self.context.config)

    def _submit_write(self, path: str, analysis: SizeAnalysis) -> None:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="sizeguard-write")
        self._pending.append(self._executor.submit(self._write_current, path, analysis))

    def _write_current(self, path: str, analysis: SizeAnalysis) -> SnapshotWriteResult:
        # Runs on the worker thread; failures are reported here, never raised.
        result = write_snapshot(path, analysis, self._fs)
        if isinstance(result, Err):
            print_plain(self._diagnostics, f"Error writing current analysis file: {result.unwrap_err().message}")
        return result

    def wait(self) -> None:
        """Block until every submitted snapshot write has finished."""
        pending, self._pending = self._pending, []
        for future in pending:
            future.result()

    def close(self) -> None:
        self.wait()
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self) -> SizeChangeHook:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
