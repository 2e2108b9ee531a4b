from .grouper import ExpectationsParseError, load_expectations, expectation_keys, \
    group_key, count_groups, group_and_count, format_group, group_report

__version__ = "1.0.0"
