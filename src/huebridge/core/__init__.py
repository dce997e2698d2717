"""Request core: URL templating, JSON request primitives and the API factories.

Why separate from adapters:
- The core never imports httpx; it talks to an injected transport and
  encoder, so it can be exercised with plain fakes.
"""
