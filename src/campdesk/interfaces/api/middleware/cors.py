"""CORS middleware - lets the browser client call the API."""

import falcon.asgi


class CORSMiddleware:
    """Adds CORS headers and answers OPTIONS preflight. "*" allows any origin."""

    def __init__(self, origins: list[str]) -> None:
        self._origins = origins
        self._allow_any = "*" in origins

    def _allowed_origin(self, origin: str | None) -> str | None:
        if origin and (self._allow_any or origin in self._origins):
            return origin
        if self._origins and not self._allow_any:
            return self._origins[0]
        return None

    def _set_cors_headers(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        allowed = self._allowed_origin(req.get_header("Origin"))
        if allowed:
            resp.set_header("Access-Control-Allow-Origin", allowed)
            resp.set_header("Access-Control-Allow-Credentials", "true")
            resp.set_header("Vary", "Origin")
        resp.set_header("Access-Control-Allow-Methods", "GET, POST, PUT, DELETE, OPTIONS")
        resp.set_header("Access-Control-Allow-Headers", "Authorization, Content-Type")
        resp.set_header("Access-Control-Expose-Headers", "Content-Disposition")
        resp.set_header("Access-Control-Max-Age", "86400")

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Short-circuit OPTIONS preflight."""
        if req.method == "OPTIONS":
            self._set_cors_headers(req, resp)
            resp.status = falcon.HTTP_200
            resp.media = {}
            resp.complete = True

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        self._set_cors_headers(req, resp)
