"""
River State Module - Entity/side encodings for the river crossing puzzle.

A configuration is one Side per Entity. It maps onto an 8-bit code where
bit (entity + 4 * side) is set when the entity is on that side:

    bit   7  6  5  4    3  2  1  0
          P  C  G  W    P  C  G  W
          -- left --    -- right --

So 0x0F is everything on the right bank and 0xA5 (1010 0101) is peasant
and goat on the left, cabbage and wolf on the right.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional, Tuple


class Entity(IntEnum):
    """Things that cross the river. Values are bit offsets within a side."""
    WOLF = 0
    GOAT = 1
    CABBAGE = 2
    PEASANT = 3

    @property
    def letter(self) -> str:
        return self.name[0]


class Side(IntEnum):
    """River banks. Values select the nibble of the bit encoding."""
    RIGHT = 0
    LEFT = 1


# Letter order used by labels
DISPLAY_ORDER = (Entity.PEASANT, Entity.CABBAGE, Entity.GOAT, Entity.WOLF)


def side_bit(entity: Entity, side: Side) -> int:
    """Bit marking entity as being on side."""
    return 1 << (int(entity) + 4 * int(side))


@dataclass(frozen=True)
class RiverState:
    """
    Immutable puzzle configuration.

    Stores exactly one side per entity, indexed by Entity value, so an
    entity can never be on both banks or on neither.

    Attributes:
        sides: Tuple of Side values, one per Entity
    """
    sides: Tuple[Side, ...]

    def __post_init__(self):
        if len(self.sides) != len(Entity):
            raise ValueError(
                f"Expected {len(Entity)} sides, got {len(self.sides)}"
            )
        # Normalize ints to Side so equality and hashing are consistent
        object.__setattr__(self, "sides", tuple(Side(s) for s in self.sides))

    @classmethod
    def all_on(cls, side: Side) -> "RiverState":
        """Configuration with every entity on one side."""
        return cls(sides=tuple(side for _ in Entity))

    @classmethod
    def from_bits(cls, bits: int) -> "RiverState":
        """
        Decode an 8-bit configuration code.

        Args:
            bits: Code with one side bit set per entity

        Returns:
            RiverState instance

        Raises:
            ValueError: If the code has stray bits or an entity is on
                both sides or neither
        """
        if bits < 0 or bits > 0xFF:
            raise ValueError(f"State code out of range: {bits:#x}")

        sides = []
        for entity in Entity:
            on_right = bool(bits & side_bit(entity, Side.RIGHT))
            on_left = bool(bits & side_bit(entity, Side.LEFT))
            if on_right == on_left:
                where = "both sides" if on_right else "neither side"
                raise ValueError(
                    f"State code {bits:#04x} puts {entity.name.lower()} on {where}"
                )
            sides.append(Side.LEFT if on_left else Side.RIGHT)
        return cls(sides=tuple(sides))

    def to_bits(self) -> int:
        """Encode as an 8-bit configuration code."""
        bits = 0
        for entity in Entity:
            bits |= side_bit(entity, self.sides[entity])
        return bits

    def side_of(self, entity: Entity) -> Side:
        """Bank the entity is on."""
        return self.sides[entity]

    def on_side(self, side: Side) -> Tuple[Entity, ...]:
        """Entities on the given bank, in Entity order."""
        return tuple(e for e in Entity if self.sides[e] == side)

    def with_moved(self, entities: Iterable[Entity], side: Side) -> "RiverState":
        """
        Return a new state with the given entities on side.

        Args:
            entities: Entities to move
            side: Destination bank

        Returns:
            New RiverState; this one is unchanged
        """
        sides = list(self.sides)
        for entity in entities:
            sides[entity] = side
        return RiverState(sides=tuple(sides))

    @property
    def label(self) -> str:
        """Left bank letters, a bar for the river, then right bank letters."""
        left = "".join(e.letter for e in DISPLAY_ORDER if self.sides[e] == Side.LEFT)
        right = "".join(e.letter for e in DISPLAY_ORDER if self.sides[e] == Side.RIGHT)
        return f"{left}|{right}"

    def __str__(self):
        return self.label


@dataclass(frozen=True)
class Crossing:
    """
    A boat trip: the peasant rows to a bank, optionally with one passenger.

    Attributes:
        destination: Bank the boat arrives at
        passenger: Entity travelling with the peasant, or None
    """
    destination: Side
    passenger: Optional[Entity] = None

    def __post_init__(self):
        object.__setattr__(self, "destination", Side(self.destination))
        if self.passenger is not None:
            passenger = Entity(self.passenger)
            if passenger == Entity.PEASANT:
                raise ValueError("The peasant cannot be their own passenger")
            object.__setattr__(self, "passenger", passenger)

    @property
    def movers(self) -> Tuple[Entity, ...]:
        """Entities that change bank."""
        if self.passenger is None:
            return (Entity.PEASANT,)
        return (Entity.PEASANT, self.passenger)

    @classmethod
    def from_bits(cls, bits: int) -> "Crossing":
        """
        Decode an 8-bit action code.

        The code sets the peasant's bit on the destination side, plus
        the passenger's bit on the same side if there is one.

        Raises:
            ValueError: If the code is not a single legal crossing
        """
        for side in Side:
            peasant = side_bit(Entity.PEASANT, side)
            if not bits & peasant:
                continue
            rest = bits & ~peasant
            if rest == 0:
                return cls(destination=side)
            for entity in (Entity.WOLF, Entity.GOAT, Entity.CABBAGE):
                if rest == side_bit(entity, side):
                    return cls(destination=side, passenger=entity)
            break
        raise ValueError(f"Not a crossing code: {bits:#04x}")

    def to_bits(self) -> int:
        """Encode as an 8-bit action code."""
        bits = 0
        for entity in self.movers:
            bits |= side_bit(entity, self.destination)
        return bits

    def apply(self, state: RiverState) -> RiverState:
        """Move the peasant and passenger to the destination bank."""
        return state.with_moved(self.movers, self.destination)

    def __str__(self):
        return "".join(e.letter for e in self.movers) + f"->{self.destination.name.lower()}"
