# cityroutes

Builds a weighted, directed graph of cities from a routes file. It finds the
shortest distance from a starting city to every city it can reach with
Dijkstra's algorithm. It also reports whether the graph contains a cycle.

## Input format

A routes file lists trips, normally one per line. Each trip holds the origin,
the destination and the trip length, with semicolons between them:

```
Austin;Dallas;200
Dallas;Houston;240
Houston;Austin;160
```

The file is read as a sequence of `origin;destination;distance` entries. A
single character, usually the newline, follows each distance. City names are
taken exactly as written, up to the next semicolon. Reading stops at the first
entry that is incomplete.

Cities are added in the order they first appear. A graph holds at most 50
cities. An edge of length 0 counts as no edge.

## Command line

```
cityroutes routes.txt
```

The command prints the cities in sorted order, three to a line, and asks for a
starting city. Input is read as whitespace-separated words. The command asks
again until the word you enter is one of the listed cities. It then prints a
summary table with one row per city, in the order the cities are settled. Each
row gives the city, its distance from the start, and the city it was reached
from. The start city shows `N/A` as its previous city. Cities that cannot be
reached from the start are left out of the table. The last line says whether
the graph contains a cycle.

The command exits with status 1 in these cases:

- it is not given exactly one argument;
- the file cannot be opened;
- the file names more than 50 cities;
- input ends before a valid starting city is entered.

## Library use

```python
from cityroutes.dijkstra import parse_routes, build_graph, dijkstra, has_cycle, format_summary_row

routes = parse_routes("Austin;Dallas;200\nDallas;Houston;240\n")
graph, vertices = build_graph(routes)

for row in dijkstra(graph, "Austin", vertices):
    print(format_summary_row(row))

print(has_cycle(graph, vertices))
```

`cityroutes.dijkstra` also provides:

- `build_graph_from_file(path)`, which reads a routes file and returns the graph with its list of cities;
- `SummaryRow`, a frozen dataclass with `vertex`, `distance` and `previous`;
- `format_vertex_listing(vertices)`, which returns the sorted city listing;
- `prompt_start_vertex(vertices, read, write)`, which asks for a start city through the given callables;
- `is_valid_vertex(vertices, vertex)`.

`dijkstra` raises `ValueError` if the start city is not among the vertices.

The package also provides the data structures the program is built on:

- `cityroutes.graph.Graph`: an adjacency-matrix graph of at most 50 vertices, with vertex marks. An unknown vertex in an edge operation raises `KeyError`.
- `cityroutes.boundedqueue.BoundedQueue`: a first-in, first-out queue with a fixed capacity. The default capacity is 10.
- `cityroutes.linkedlist.LinkedList`: a singly linked list with a header node and `ListIterator` positions.
- `cityroutes.hashtable.HashTable`: a separate-chaining hash table of strings or integers. Its number of buckets is a prime (`next_prime`). `find` returns a chosen not-found value for a missing item.

Errors are defined as subclasses of `cityroutes.errors.DataStructureError`:
`Underflow`, `Overflow`, `OutOfMemory` and `BadIterator`. Adding to a full
queue or a full graph raises `Overflow`. Taking an item from an empty queue
raises `Underflow`. Retrieving past the end of a list raises `BadIterator`.

## What it does not do

Graphs exist only in memory. Nothing is saved, and cities and routes cannot be
removed one at a time. The command reads one routes file per run, and a city
name that contains whitespace cannot be chosen as its starting city.

## Tests

```
pip install -e .[test]
pytest
```