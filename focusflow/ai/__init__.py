"""AI capabilities - text and image generation behind swappable interfaces

The core never talks to a provider directly. It calls a TextGenerator or
ImageGenerator held on AppState; both raise UpstreamUnavailable on any
failure and every caller has a local fallback ready.

Components:
    text_generator.py: TextGenerator + Anthropic implementation
    image_generator.py: ImageGenerator + HTTP implementation + SVG placeholder
    coach.py: Coaching replies and daily summaries
"""
