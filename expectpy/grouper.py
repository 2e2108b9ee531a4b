import json
import logging

from collections import Counter
from collections.abc import Mapping

# 'expectpy' logger
logger = logging.getLogger('expectpy')


# Exception
class ExpectationsParseError(ValueError):
    def __init__(self, path, message):
        super().__init__(path, message)
        self.path = path
        self.message = message

    def __repr__(self):
        return "ExpectationsParseError: " + str(self.path) + " - " + self.message

    def __str__(self):
        return repr(self)


# NaN/Infinity/-Infinity are not json
def _reject_constant(name):
    raise ValueError(f'non-standard constant {name}')


# Load the expectations document - a json object of expectation key -> result.
# Missing/unreadable files raise OSError as-is.
def load_expectations(path):
    with open(path, 'rb') as f:
        data = f.read()
    logger.debug(f'Read {len(data)} bytes from {path}')

    try:
        text = data.decode('utf-8')
    except UnicodeDecodeError as e:
        logger.error(f'Invalid utf-8 in {path}: {e}')
        raise ExpectationsParseError(path, f'invalid utf-8: {e}') from e

    try:
        document = json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        logger.error(f'Invalid json in {path}: {e}')
        raise ExpectationsParseError(path, f'invalid json: {e}') from e

    if not isinstance(document, dict):
        logger.error(f'Expected json object in {path}, got {type(document).__name__}')
        raise ExpectationsParseError(path, f'expected json object, got {type(document).__name__}')

    return document


# Keys in document order (json.loads preserves insertion order)
def expectation_keys(document):
    if not isinstance(document, Mapping):
        raise TypeError(f'expectations document must be a mapping, not {type(document).__name__}')
    return list(document.keys())


# 'a/b/c' -> 'a/b'
# Keys without a slash, or with only a leading slash, group under ''
def group_key(key):
    return key.rpartition('/')[0]


# Counter keeps the first-seen order of the groups
def count_groups(keys):
    counts = Counter()
    for key in keys:
        counts[group_key(key)] += 1
    return counts


def group_and_count(document):
    """
    Group the document's expectation keys by their parent path and count them.

    Parameters
    ----------
    document : Mapping
        Parsed expectations document; only its keys (in enumeration order) are used.

    Returns
    -------
    list of (str, int)
        (group, count) pairs by descending count.  Groups with equal counts
        keep the order in which they were first seen.
    """
    keys = expectation_keys(document)
    counts = count_groups(keys)
    logger.debug(f'Counted {len(keys)} keys in {len(counts)} groups')

    # most_common() is a stable sort on count
    return counts.most_common()


def format_group(group, count):
    return f"'{group}': {count}"


def group_report(path):
    document = load_expectations(path)
    return [format_group(group, count) for group, count in group_and_count(document)]
