from .sequence import Sequence, UniqueSequence
from .shared import printf
from .table import Empty, Occupied, Table, Tombstone


def dump_table(table: Table, name: str):
    printf("== {0:s} ==\n", name)

    for index, slot in enumerate(table.slots):
        printf("{0:04d} ", index)
        match slot:
            case Empty():
                printf("EMPTY\n")
            case Tombstone():
                printf("TOMBSTONE\n")
            case Occupied(pair=pair):
                printf("{0!r} -> {1!r}\n", pair.key, pair.value)


def dump_sequence(seq: Sequence | UniqueSequence, name: str):
    printf("== {0:s} ==\n", name)

    for index, element in enumerate(seq):
        printf("{0:04d} {1!r}\n", index, element)
