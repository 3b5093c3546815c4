"""
Naming forms of a table name for code generators.

Only the last ``_``-separated word of a snake_case name is inflected, so
``user_profiles`` becomes ``user_profile``. The rules cover regular English
plurals plus a short table of irregular and uncountable words common in table
names; other irregular words are returned unchanged.
"""

from pydantic.alias_generators import to_camel, to_pascal

from pgmodel.model.entities import TableNames

_SIBILANT_ENDINGS = ("s", "x", "z", "ch", "sh")
_VOWELS = "aeiou"

# singular and plural are the same word
_UNCOUNTABLE = frozenset({
    "data",
    "equipment",
    "feedback",
    "information",
    "media",
    "metadata",
    "news",
    "series",
    "settings",
    "species",
    "staff",
})

_IRREGULAR_PLURALS = {
    "analysis": "analyses",
    "axis": "axes",
    "basis": "bases",
    "child": "children",
    "crisis": "crises",
    "diagnosis": "diagnoses",
    "index": "indices",
    "matrix": "matrices",
    "person": "people",
    "synopsis": "synopses",
    "thesis": "theses",
    "vertex": "vertices",
}
_IRREGULAR_SINGULARS = {plural: singular for singular, plural in _IRREGULAR_PLURALS.items()}


def singularize(word: str) -> str:
    if word in _UNCOUNTABLE:
        return word
    if word in _IRREGULAR_SINGULARS:
        return _IRREGULAR_SINGULARS[word]
    if word.endswith("ies") and len(word) > 3:
        return word[:-3] + "y"
    if word.endswith("es") and word[:-2].endswith(_SIBILANT_ENDINGS):
        return word[:-2]
    if word.endswith("s") and not word.endswith(("ss", "us", "is")):
        return word[:-1]
    return word


def pluralize(word: str) -> str:
    if word in _UNCOUNTABLE or word in _IRREGULAR_SINGULARS:
        return word
    if word in _IRREGULAR_PLURALS:
        return _IRREGULAR_PLURALS[word]
    if word.endswith("y") and len(word) > 1 and word[-2] not in _VOWELS:
        return word[:-1] + "ies"
    if word.endswith(_SIBILANT_ENDINGS):
        return word + "es"
    return word + "s"


def _inflect_last_word(name: str, inflect) -> str:
    head, sep, last = name.rpartition("_")
    return f"{head}{sep}{inflect(last)}" if last else name


def get_table_names(name: str) -> TableNames:
    """
    >>> get_table_names("blog_posts").singular_pascal
    'BlogPost'
    """
    singular = _inflect_last_word(name, singularize)
    plural = _inflect_last_word(singular, pluralize)
    return TableNames(
        singular=singular,
        plural=plural,
        singular_camel=to_camel(singular),
        plural_camel=to_camel(plural),
        singular_pascal=to_pascal(singular),
        plural_pascal=to_pascal(plural),
    )
