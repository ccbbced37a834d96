"""Actor middleware - attributes requests to an actor for the audit trail."""

import falcon.asgi


class ActorMiddleware:
    """Sets req.context.actor from the X-Actor header, falling back to a default."""

    def __init__(self, default_actor: str = "system") -> None:
        self._default_actor = default_actor

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        actor = (req.get_header("X-Actor") or "").strip()
        req.context.actor = actor or self._default_actor
