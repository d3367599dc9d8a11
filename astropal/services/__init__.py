from astropal.services.content_generator import ContentGenerator, GeneratedContent

__all__ = ["ContentGenerator", "GeneratedContent"]
