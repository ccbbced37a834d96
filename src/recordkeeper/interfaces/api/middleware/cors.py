"""CORS middleware for the records admin console."""

import falcon.asgi

_ALLOW_METHODS = "GET, POST, DELETE, OPTIONS"
_ALLOW_HEADERS = "Content-Type, X-Actor"


class CORSMiddleware:
    """Echo allowed origins back; "*" in origins allows any origin.

    Requests from other origins get no CORS headers, so browsers block them.
    OPTIONS preflight requests are answered here without reaching a resource.
    """

    def __init__(self, origins: list[str], max_age: int = 600) -> None:
        self._allow_any = "*" in origins
        self._origins = frozenset(o for o in origins if o != "*")
        self._max_age = str(max_age)

    def _allowed(self, origin: str | None) -> bool:
        return bool(origin) and (self._allow_any or origin in self._origins)

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        if req.method != "OPTIONS":
            return
        origin = req.get_header("Origin")
        if self._allowed(origin):
            resp.set_header("Access-Control-Allow-Methods", _ALLOW_METHODS)
            resp.set_header("Access-Control-Allow-Headers", _ALLOW_HEADERS)
            resp.set_header("Access-Control-Max-Age", self._max_age)
        resp.status = falcon.HTTP_204
        resp.complete = True

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        origin = req.get_header("Origin")
        resp.append_header("Vary", "Origin")
        if self._allowed(origin):
            resp.set_header("Access-Control-Allow-Origin", origin)
