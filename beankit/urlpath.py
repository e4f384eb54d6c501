"""Match URL paths against templates such as ``/shelves/:shelf/books/:book``."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Segment:
    """A constraint on a single segment of a path."""

    is_param: bool = False
    param: str = ""
    const: str = ""


@dataclass
class Match:
    """Data extracted by matching an input against a :class:`Path`.

    ``trailing`` holds the trailing segments without their leading slash,
    except for a path built from ``"*"`` alone, where it is the whole input.
    """

    params: dict[str, str] = field(default_factory=dict)
    trailing: str = ""


@dataclass(frozen=True)
class Path:
    """A sequence of segment constraints, optionally accepting trailing input."""

    segments: tuple[Segment, ...] = ()
    trailing: bool = False

    def match(self, s: str) -> Match | None:
        """Return the parameters and trailing part of ``s``, or None if it does not match."""
        params: dict[str, str] = {}
        last = len(self.segments) - 1

        for index, segment in enumerate(self.segments):
            slash = s.find("/")
            if slash == -1:
                head, rest = s, ""
                # Running out of slashes is only fine on the last segment
                # of a path that takes no trailing input.
                if index != last or self.trailing:
                    return None
            else:
                head, rest = s[:slash], s[slash + 1:]
                if index == last and not self.trailing:
                    return None

            if segment.is_param:
                params[segment.param] = head
            elif head != segment.const:
                return None

            s = rest

        return Match(params=params, trailing=s)

    def build(self, m: Match) -> str | None:
        """Inverse of :meth:`match`; None if a parameter of the path is missing from ``m``."""
        parts = []
        for segment in self.segments:
            if segment.is_param:
                if segment.param not in m.params:
                    return None
                parts.append(m.params[segment.param])
            else:
                parts.append(segment.const)

        built = "/".join(parts)
        if self.trailing and self.segments:
            built += "/"
        return built + m.trailing


def parse_path(path: str) -> Path:
    """Build a :class:`Path` from its string form.

    Segments starting with ``:`` are parameters; a final ``*`` segment
    means trailing input is accepted.
    """
    pieces = path.split("/")
    trailing = pieces[-1] == "*"
    if trailing:
        pieces = pieces[:-1]

    segments = tuple(
        Segment(is_param=True, param=piece[1:])
        if piece.startswith(":")
        else Segment(is_param=False, const=piece)
        for piece in pieces
    )
    return Path(segments=segments, trailing=trailing)