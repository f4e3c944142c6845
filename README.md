# resourcekit

A small registry for named, typed resources. Resources are grouped by their
type. Within a type, they are looked up by the 64-bit FNV-1a hash of their
name. A resource can be stored as compact JSON and read back from it.

The package has no runtime dependencies and needs Python 3.10 or later.

## Installing

```
pip install .
```

## Defining a resource type

Subclass `ResourceBase`. `to_dict` returns the fields that are saved, and
`load_dict` restores them. Extend both methods to keep fields of your own.
`load_dict` must return `self`, because `deserialize` and
`ResourceManager.load_resources` use the value it returns.

```python
from resourcekit.base import ResourceBase

class Texture(ResourceBase):
    def __init__(self):
        super().__init__()
        self.width = 0

    def to_dict(self):
        data = super().to_dict()
        data["width"] = self.width
        return data

    def load_dict(self, data):
        super().load_dict(data)
        self.width = data.get("width", 0)
        return self
```

What a `ResourceBase` provides:

- `initialize(name)` sets `name`, and sets `name_hash` to `fnv1a(name)`.
- `serialize()` returns compact JSON, for example `{"_name":"grass","width":64}`.
- `Texture.deserialize(text)` makes a new `Texture` from JSON text.
- `load_dict` raises `TypeError` when the data is not a mapping, or when `_name` is not a string.
- `Texture.type_name()` is the class's module-qualified name. The module part is left out for classes defined in `__main__` or `builtins`.
- `Texture.type_hash()` is the FNV-1a hash of `type_name()`. The manager uses it to tell types apart.

## Managing resources

```python
from resourcekit.manager import ResourceManager

manager = ResourceManager("data")          # relative paths resolve under ./data

texture = Texture()
texture.initialize("grass")
handle = manager.add_resource(texture)     # a resourcekit.resource.Resource
assert manager.get_resource(Texture, texture.name_hash) is handle

manager.save_resource(texture, "grass.json")
copy = manager.load_resource(Texture, "grass.json")

manager.save_resources([texture, copy], "all.json")
textures = manager.load_resources(Texture, "all.json")

manager.free_all_resources()
```

There is also a shared instance. `ResourceManager.init(sys.argv)` creates it
once, with the directory of `argv[0]` as its base directory. Later calls
return the same manager, and an empty `argv` raises `ValueError`.
`ResourceManager.instance()` returns the shared manager, or `None` before
`init` has been called.

How the manager behaves:

- `add_resource(resource, destroyer=None)` registers the resource under its type hash and its current `name_hash`. It returns the handle.
  - If an entry already exists under the same type and name, `add_resource` does not replace it and returns the handle that is there.
  - Passing `None` returns `None`.
  - Anything that is not a `ResourceBase` raises `TypeError`.
  - Renaming a resource after it has been added does not re-key it.
- `get_resource(type, name_hash)` returns the handle, or `None`.
- `remove_resource` drops a handle without running its destroyer.
- `free_resource` and `free_all_resources` run each handle's destroyer, if it has one, and then drop the handle.
- `read_text(path)` returns `""` for a missing file. `write_text(path, text)` writes UTF-8.
- `load_resource` returns a fresh, unnamed instance when the file is missing or empty.
- `load_resources` returns `[]` when the file is missing or empty. It raises `ValueError` when the JSON is not an array.
- `scan(path)` returns a `Directory` tree of the subdirectories under `path`, with children sorted by path. It raises `NotADirectoryError` when `path` is not a directory.

The type arguments of `get_resource`, `remove_resource`, `free_resource`,
`load_resource` and `load_resources` must be `ResourceBase` subclasses.
Anything else raises `TypeError`.

## Lower-level pieces

- `resourcekit.hashing.fnv1a(text)` returns the 64-bit FNV-1a hash of a string, encoded as UTF-8, or of bytes. `type_name(cls)` returns the name described above.
- `resourcekit.resource.Resource` holds a `value` and a destroyer.
  - `write(value, destroyer)` stores them.
  - `release()` runs the destroyer once and then clears both.
  - As a context manager, it releases on exit.
- `resourcekit.directory.Directory` is a tree node. It has `path`, `fs_path`, `parent` and `children`.
  - `add_child(child)` links a child to this node.
  - `child(index)` returns the child at `index`, or `None` when `index` is out of range.

## What it does not do

- There is no command-line tool. This is a library only.
- `scan` only maps directories. It does not find or load resource files.
- Nothing is persisted unless you call the save methods.
- The registry lives in memory for the life of the manager.

## Tests

```
pip install .[test]
pytest
```