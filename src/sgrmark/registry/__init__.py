# topmark:header:start
#
#   project      : SgrMark
#   file         : __init__.py
#   file_relpath : src/sgrmark/registry/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tag registries.

This package exposes:

* `sgrmark.registry.renderer.StaticRenderer`: an immutable tag mapping.
* `sgrmark.registry.renderer.RegistryRenderer`: a mutable, thread-safe registry.
* `sgrmark.registry.builtins`: the built-in tag vocabulary.

Most users should start from the built-ins:

```python
from sgrmark.registry.builtins import builtin_renderer, default_registry

shared = builtin_renderer()  # read-only, shared
mine = default_registry()  # fresh, mutable copy
```
"""

from __future__ import annotations
