"""API route modules."""

from video_producer.api.routes import health, productions, scripts, visual_plans

__all__ = ["health", "productions", "scripts", "visual_plans"]
