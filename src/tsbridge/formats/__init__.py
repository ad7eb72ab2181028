"""Wire formats for passing collected declarations to a renderer.

The TypeScript text itself is produced outside this package. A build step
collects the declarations for its root types, writes them out as a JSON
array of tagged objects, and the renderer reads that array back as
``InterfaceDeclaration``, ``TypeAlternatives`` and ``RawDeclaration`` values.
"""

from tsbridge.formats.json import from_json, to_json

__all__ = ["from_json", "to_json"]
