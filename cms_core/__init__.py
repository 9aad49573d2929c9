# =============================================================================
# cms_core/__init__.py
# =============================================================================
# This package contains ALL request/response logic for the Optimizely CMS
# tool server.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or any orchestration
#   framework.  The only third-party import is httpx (the HTTP transport).
#   Every module here can be exercised from a bare REPL or a unit test with a
#   mocked transport and no internet access.
#
# LAYOUT (leaf-first):
#   models.py      - OperationSpec, RequestContext, ResponseEnvelope, Ok/Err
#   errors.py      - ValidationError, TransportError
#   urls.py        - URL Builder
#   operations.py  - Operation Registry + dispatcher
#   client.py      - Request Executor, Response Normalizer, Error Classifier
#   adapters.py    - the three public adapters (delivery, manifest, types)
# =============================================================================
