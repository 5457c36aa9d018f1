from starforge.random_stream import RandomStream

_PREFIXES = (
    "Al", "Be", "Ca", "De", "El", "Fa", "Ga", "Ha", "Is", "Ka",
    "Lo", "Ma", "Ne", "Or", "Pi", "Qu", "Ra", "Se", "Ta", "Ve",
)
_MIDDLES = ("", "dar", "ri", "the", "lo", "mi", "sha", "ne", "ko", "va", "zu", "ra")
_SUFFIXES = ("n", "s", "ra", "ris", "tor", "lia", "nix", "mos", "ion", "ea", "us", "ax")
_DESIGNATIONS = ("Prime", "Major", "Minor", "Alpha", "Beta", "Gamma", "Delta")


def _pick(rng: RandomStream, options: tuple[str, ...]) -> str:
    return options[int(rng.integers(0, len(options)))]


def generate_star_name(rng: RandomStream) -> str:
    return _pick(rng, _PREFIXES) + _pick(rng, _MIDDLES) + _pick(rng, _SUFFIXES)


def generate_star_system_name(rng: RandomStream) -> str:
    return f"{generate_star_name(rng)} {_pick(rng, _DESIGNATIONS)}"
