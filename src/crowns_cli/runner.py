import time
from typing import Callable, List, Tuple

from crowns_cli.display import format_elapsed
from crowns_cli.utils import RequestResult, RunConfig, RunSummary

SendFn = Callable[[str, str, str], Tuple[int, str]]
LogFn = Callable[..., None]


def log_config(cfg: RunConfig, log: LogFn):
    for name, value in cfg.headers:
        log(f"Header {name!r} : {value!r}")
    log(f"URL: {cfg.url}")
    log(f"Method: {cfg.method}")
    if cfg.user_agent_explicit:
        log(f"User-Agent: {cfg.user_agent}")
    if cfg.method == "POST":
        log(f"Data: {cfg.data}")
    log(f"Crowns: {cfg.crowns}")
    log(f"Timeout: {cfg.timeout}")
    log(f"Verbose: {cfg.verbose}")
    log(f"Silent: {cfg.silent}")


def run_crowns(cfg: RunConfig, send: SendFn, log: LogFn,
               sleep: Callable[[float], None] = time.sleep,
               clock: Callable[[], float] = time.perf_counter) -> RunSummary:
    """Send the configured request ``cfg.crowns`` times, one after another.

    Errors raised by ``send`` are not caught: the first failure ends the run
    and earlier results are dropped along with it.
    """
    log_config(cfg, log)

    results: List[RequestResult] = []
    total = clock()
    for i in range(1, cfg.crowns + 1):
        current = clock()
        status_code, text = send(cfg.method, cfg.url, cfg.data)
        elapsed = clock() - current

        log(f"Request {i} with status code {status_code}")
        log(f"{format_elapsed(elapsed)} elapsed")
        log(text, cfg.verbose and not cfg.silent)
        results.append(RequestResult(index=i, status_code=status_code, elapsed=elapsed, text=text))

        # also after the last crown
        if cfg.crowns > 1:
            sleep(cfg.timeout)

    summary = RunSummary(results=results, total=clock() - total)
    log(f"{cfg.crowns} requests totaled to {format_elapsed(summary.total)}")
    return summary
