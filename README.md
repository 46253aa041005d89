# codexkit

A small library of plain data structures and helpers. It has no dependencies beyond the standard library.

- `codexkit.array.Array` is a growable sequence of values.
  - It records a declared `elem_size`, which takes part in equality and serialization.
  - Adding or setting `None` stores a copy of the array's `zero` value.
  - It supports `add`, `get`, `set`, `fast_remove`, `equals` and `sort(key=None)`.
  - `fast_remove` is an unordered removal: the last item takes the removed item's place.
  - `release()` passes every item to the optional `item_release` callback and then empties the array. Using the array as a context manager calls `release()` on exit.
  - Indexes outside the array raise `IndexError`.
- `codexkit.linked_list.LinkedList` is a singly linked list.
  - It supports `prepend`, `append`, `find`, `remove` and `tail`.
  - Iterating over the list gives its values.
  - `find` and `remove` match values with a three-way comparison function. By default values match only when they are the same object (`identity_compare`).
- `codexkit.rbtree.RBTree` is a red-black tree keyed by a three-way comparison function.
  - `set` inserts a key or replaces its value.
  - `get` returns the `RBTreeNode` for a key, or `None`.
  - `remove` deletes a key and returns whether it was present.
  - The tree supports `len()` and `in`.
  - Iterating over the tree gives its nodes in key order.
- `codexkit.iterators.filtered(iterable, predicate)` lazily yields the items for which `predicate` is true.
- `codexkit.comparator` provides the three-way comparison functions. Each returns -1, 0 or 1.
  - `str_compare` compares strings.
  - `uint16_compare` compares integers wrapped to unsigned 16 bits.
  - `identity_compare` compares objects by identity.
- `codexkit.serializer` provides big-endian binary encoding.
  - `serialize_string`, `estimate_string_size` and `deserialize_string` handle strings written as a u64 length, then UTF-8 bytes, then a NUL.
  - `Serializer` is an abstract base class. Subclasses implement `serialize` and `deserialize`.
  - `ArraySerializer` writes an `Array` as its length, its element size, and then each item through an item serializer.
- `codexkit.dotenv.parse_dotenv` is a strict parser for `KEY=VALUE` lines.
  - It returns a `Dotenv` with typed getters: `get_string`, `get_uint16` and `get_bool`.
  - Problems raise `DotenvError`, which is a subclass of `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

### Red-black tree

```python
from codexkit.comparator import str_compare
from codexkit.iterators import filtered
from codexkit.rbtree import RBTree

tree = RBTree(str_compare)
for word in ["Zero", "Karma", "Emulacrum", "Maya"]:
    tree.set(word, None)

print([node.key for node in tree])
# ['Emulacrum', 'Karma', 'Maya', 'Zero']

short = filtered(tree, lambda node: len(node.key) <= 5)
print([node.key for node in short])
# ['Karma', 'Maya', 'Zero']

print(tree.get("Sigil"))     # None
print(tree.remove("Maya"))   # True
print(len(tree))             # 3
```

### Array

```python
from codexkit.array import Array

numbers = Array(elem_size=4, zero=0)
for n in (3, 1, 2):
    numbers.add(n)
numbers.add(None)            # stores 0
numbers.sort()
print(list(numbers))         # [0, 1, 2, 3]
numbers.fast_remove(0)
print(list(numbers))         # [3, 1, 2]
```

### Dotenv

```python
from codexkit.dotenv import parse_dotenv

env = parse_dotenv("Port=1337\nDebug=true\nName=Galatea")
env.get_uint16("Port")   # 1337
env.get_bool("Debug")    # True
env.get_string("Name")   # 'Galatea'
"Port" in env            # True
```

Parsing rules:

- Keys and values may contain only ASCII letters and digits.
- Quotes, comments and whitespace are rejected.
- A trailing key with no `=` is ignored.

`get_uint16` accepts only decimal digits up to 65535. An empty value reads as 0. `get_bool` accepts only `true` and `false`. A missing key, malformed input or a value of the wrong type raises `DotenvError`.

### Binary serialization

```python
from codexkit.array import Array
from codexkit.serializer import (
    ArraySerializer,
    Serializer,
    deserialize_string,
    serialize_string,
)

data = serialize_string("The Tower")
text, consumed = deserialize_string(data, 0)   # ('The Tower', len(data))


class StringSerializer(Serializer):
    def serialize(self, entity):
        return serialize_string(entity)

    def deserialize(self, buffer, offset=0):
        return deserialize_string(buffer, offset)


words = Array(elem_size=8)
words.add("Zero")
words.add("Maya")
codec = ArraySerializer(StringSerializer())
blob = codec.serialize(words)
restored, used = codec.deserialize(blob)
assert restored.equals(words) and used == len(blob)
```

## What it does not do

codexkit is a library only. It has no command-line interface. It does no memory or allocation tracking. It reads nothing from files or the process environment: `parse_dotenv` takes a string that you have already read.