"""Pull items from a live scan one at a time."""

from maxo import scan

with scan("go rocks\n") as handle:
    while (item := handle.next_item()) is not None:
        print(f"{item.position:>3}  {item.kind.name:<10} {item.value!r}")
