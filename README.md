# mpcutils

Small building blocks for protocol code:

- **Range sets** (`mpcutils.rangeset`): `RangeSet` holds a set of integers as
  sorted, non-adjacent, non-empty half-open ranges. The operations live in
  their own modules: `union` (`mpcutils.union`), `intersection`
  (`mpcutils.intersection`), `difference` (`mpcutils.difference`),
  `symmetric_difference` (`mpcutils.symmetric`) and `index_ranges`
  (`mpcutils.index`) for picking slices out of lists, strings and bytes.
- **Helpers**: `filter_drain` (`mpcutils.filter_drain`) removes and yields
  matching items from a list in place; `NestedId` (`mpcutils.nested_id`) builds
  hierarchical identifiers such as `foo/bar/0`; `transpose`
  (`mpcutils.transpose`) turns a tuple of optional values into an optional
  tuple; `xor`, `choose`, `pick`, `contains_dups` and `contains_dups_by` live in
  `mpcutils.iterutils`.
- **Websocket relay** (`mpcutils.relay`): a server that pairs two websocket
  clients, or bridges a websocket client to a TCP server.

## Installation

```
pip install mpcutils
```

For the test suite:

```
pip install "mpcutils[test]"
pytest
```

## Range sets

```python
from mpcutils.rangeset import RangeSet
from mpcutils.union import union
from mpcutils.difference import difference
from mpcutils.intersection import intersection

a = RangeSet([range(10, 20), range(30, 40)])

print(union(a, range(15, 35)))        # RangeSet([range(10, 40)])
print(difference(a, range(12, 15)))   # RangeSet([range(10, 12), range(15, 20), range(30, 40)])
print(intersection(a, range(0, 12)))  # RangeSet([range(10, 12)])

print(15 in a, len(a), a.min(), a.max())  # True 20 10 39
```

Ranges are half-open, like Python's `range`, and must have a step of 1.
Overlapping or adjacent input ranges are merged when a set is built, and
`a | b` / `a |= b` take the union in place of `union`.

A `RangeSet` also offers `iter_ranges()`, `len_ranges()`, `end()`,
`split_off(at)`, `shift_left(offset)`, `shift_right(offset)`, `to_range()`,
`is_subset(other)` and `is_disjoint(other)`. `intersection` of two plain
ranges returns a `range`, or `None` when they do not overlap.

```python
from mpcutils.index import index_ranges

print(index_ranges("123456789", RangeSet([range(0, 3), range(5, 8)])))  # 123678
```

## Helpers

```python
from mpcutils.filter_drain import filter_drain
from mpcutils.nested_id import NestedId
from mpcutils.transpose import transpose

items = [1, 2, 3, 4]
print(list(filter_drain(items, lambda x: x % 2 == 0)))  # [2, 4]
print(items)                                            # [1, 3]

ident = NestedId("foo").append_string("bar").append_counter()
print(ident)              # foo/bar/0
print(ident.increment())  # foo/bar/1

print(transpose((1, "a")))   # (1, 'a')
print(transpose((1, None)))  # None
```

Calling `increment` on an identifier whose last segment is a string raises
`ValueError`.

## Websocket relay

```
mpcutils-relay
```

The relay listens on `127.0.0.1:8080` by default; set `PROXY_IP` and
`PROXY_PORT` in the environment to change the address. Clients connect to:

- `/ws?id=<name>`: the first client waits until a second one connects with
  the same id; then every message from one is passed on to the other.
- `/tcp?addr=<host:port>`: the relay opens a TCP connection to the given
  address, writes binary websocket messages to it and sends its data back as
  binary messages. A text message ends the connection with an error; when the
  TCP server closes, the websocket is closed.

Any other path, or a path without a query string, is closed with an error.
From code, `serve(host, port, relay)` runs the same server until cancelled, and
`Relay.handle(websocket)` serves a single accepted connection.

## What this package does not do

It has no asynchronous channel, barrier, multiplexing or message-framing
helpers; apart from the relay, every part of the package is synchronous.