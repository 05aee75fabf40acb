# chainhash

A compact hash table for string keys. The table has a fixed number of slots.
Each slot holds a chain of unique keys kept in ascending lexicographic order,
so keys that collide sit together and can be shown side by side.

The hash of a key is the sum of the bytes of its UTF-8 encoding (each byte
taken as a signed 8-bit value, summed as an unsigned 32-bit integer) modulo
the table size. For plain ASCII keys that is simply the sum of the character
codes modulo the size, which makes it easy to predict where a key lands and
which keys collide.

## Installation

```
pip install .
```

## Usage

```python
from chainhash.table import HashTable

table = HashTable(3)     # 3 slots; a size below 1 raises ValueError
table.size               # 3
table.insert("Moscow")   # True
table.insert("Madrid")   # True
table.insert("Moscow")   # False: the key is already present

"Madrid" in table        # True
table.hash("Moscow")     # 2, the slot index of "Moscow"

print(table)                          # every key, slot by slot
print(table.format_all_collisions())  # "Hash value = 2: Madrid Moscow \n"
print(table.format_collisions(2))     # "Madrid Moscow \n"

table.remove("Madrid")   # True
table.remove("Madrid")   # False: nothing left to remove
```

`str(table)` joins the chains of all slots, each key followed by a space, and
ends with a newline. `format_all_collisions()` returns one line for every slot
holding more than one key. `format_collisions(hash_value)` returns the chain of
one slot and raises `IndexError` when the slot number is outside the table.

A single chain can be used directly as well:

```python
from chainhash.chain import SortedChain

chain = SortedChain()
chain.insert("dog")      # True
chain.insert("cat")      # True
chain.insert("cat")      # False
list(chain)              # ['cat', 'dog']
len(chain)               # 2
"cat" in chain           # True
str(chain)               # 'cat dog '
chain.remove("dog")      # True
other = chain.copy()     # an independent chain with the same keys
```

Keys must be `str`; inserting or removing anything else raises `TypeError`,
while a membership test with a non-string simply answers `False`.

## Demonstration

The package ships a demonstration that walks through insertion, duplicate
keys, removal and collision reports, printing the table after each step:

```
chainhash-demo
```

The same output can be written to any text stream with
`chainhash.demo.run_demos(out)`.

## What it does not do

The table never grows or rehashes: its number of slots is set when it is
created. It stores keys only, with no associated values, and keeps everything
in memory.

## Running the tests

```
pip install .[test]
pytest
```