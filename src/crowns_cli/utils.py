from typing import List, Optional, Sequence, Tuple
from dataclasses import dataclass, field

METHODS = ("GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "CONNECT", "OPTIONS", "TRACE")

HEADER_SEPARATOR = ": "
HEADER_FORMAT_HINT = "Header must follow 'Header: Value' format. (Include the whitespace after the colon)"


# ========== Config & Models ==========
@dataclass
class RunConfig:
    url: str
    method: str = "GET"
    user_agent: str = ""
    data: str = "{}"
    crowns: int = 1
    timeout: int = 0
    headers: List[Tuple[str, str]] = field(default_factory=list)
    verbose: bool = False
    silent: bool = False
    noprefix: bool = False
    user_agent_explicit: bool = False

    def __post_init__(self):
        self.method = self.method.upper()
        if self.method not in METHODS:
            raise ValueError(f"Unsupported method: {self.method}")
        if self.crowns < 1:
            raise ValueError("crowns must be at least 1")
        if self.timeout < 0:
            raise ValueError("timeout must not be negative")

    @classmethod
    def init_from_options(cls, url: str, method: str, user_agent: Optional[str], data: str,
                          crowns: int, timeout: int, headers: Sequence[str],
                          verbose: bool, silent: bool, noprefix: bool,
                          default_user_agent: str = "") -> "RunConfig":
        return cls(
                url=url,
                method=method,
                user_agent=user_agent if user_agent is not None else default_user_agent,
                data=data,
                crowns=crowns,
                timeout=timeout,
                headers=[parse_header(h) for h in headers],
                verbose=verbose,
                silent=silent,
                noprefix=noprefix,
                user_agent_explicit=user_agent is not None,
        )


@dataclass
class RequestResult:
    index: int
    status_code: int
    elapsed: float
    text: str


@dataclass
class RunSummary:
    results: List[RequestResult]
    total: float

    @property
    def count(self) -> int:
        return len(self.results)


def parse_header(raw: str) -> Tuple[str, str]:
    """Split a ``Name: Value`` string once on the first ``": "``."""
    name, sep, value = raw.partition(HEADER_SEPARATOR)
    if not sep:
        raise ValueError(HEADER_FORMAT_HINT)
    return name, value
