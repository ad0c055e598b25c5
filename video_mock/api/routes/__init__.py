from __future__ import annotations

from video_mock.api.routes.video import router as video_router

__all__ = ["video_router"]
