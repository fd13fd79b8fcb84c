from typing import Iterable, Optional, Tuple

import requests
from requests.exceptions import InvalidHeader
from requests.utils import check_header_validity


class CrownsError(Exception):
    """Base class for failures that end a run with exit status 1."""


class ClientBuildError(CrownsError):
    pass


class RequestFailed(CrownsError):
    def __init__(self, method: str, url: str, cause: Exception):
        super().__init__(f"{method} {url} failed: {cause}")
        self.method = method
        self.url = url
        self.cause = cause


# ========== HTTP Client ==========
class HttpClient:
    """A ``requests.Session`` carrying the user agent and static headers for every crown."""

    def __init__(self, user_agent: str, headers: Iterable[Tuple[str, str]] = (),
                 session: Optional[requests.Session] = None):
        self.session = session or requests.Session()
        defaults = {"User-Agent": user_agent}
        for name, value in headers:
            defaults[name] = value
        for item in defaults.items():
            try:
                check_header_validity(item)
                # http.client sends header lines as latin-1
                item[0].encode("latin-1")
                item[1].encode("latin-1")
            except InvalidHeader as e:
                self.session.close()
                raise ClientBuildError(str(e)) from e
            except UnicodeEncodeError as e:
                self.session.close()
                raise ClientBuildError(f"Header {item[0]!r} is not latin-1 encodable: {item[1]!r}") from e
        self.session.headers.update(defaults)

    def send(self, method: str, url: str, body: str) -> Tuple[int, str]:
        method = method.upper()
        try:
            if method == "POST":
                resp = self.session.post(url, data=body.encode("utf-8"))
            elif method == "PUT":
                resp = self.session.put(url)
            elif method == "PATCH":
                resp = self.session.patch(url)
            elif method == "DELETE":
                resp = self.session.delete(url)
            elif method == "HEAD":
                resp = self.session.head(url)
            else:
                resp = self.session.get(url)
            return resp.status_code, resp.text
        except requests.RequestException as e:
            raise RequestFailed(method, url, e) from e

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
