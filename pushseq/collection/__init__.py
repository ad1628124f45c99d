from .collect import collect, collect_w, collectM, count, count_w, countM, for_each, for_each_w, for_eachM
from .fold import reduce, reduce_w, reduceM
from .predicates import all, all_w, allM, any, any_w, anyM
from .search import find, find_w, first, first_w, last, last_w, lastM, lookupM, nth, nth_w

__all__ = (
    # Plain values
    "all",
    "any",
    "collect",
    "count",
    "find",
    "first",
    "for_each",
    "last",
    "nth",
    "reduce",
    # WriterResult
    "all_w",
    "any_w",
    "collect_w",
    "count_w",
    "find_w",
    "first_w",
    "for_each_w",
    "last_w",
    "nth_w",
    "reduce_w",
    # Generic
    "allM",
    "anyM",
    "collectM",
    "countM",
    "for_eachM",
    "lastM",
    "lookupM",
    "reduceM",
)
