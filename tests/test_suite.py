"""Tests for suite loading, validation and parsing."""

import json

from containment import CheckMode, IncludeMatcher, is_matcher, load_suite, validate_suite_yaml


VALID_SUITE = """
version: 1
name: Users
data:
  users:
    - {name: alice, role: admin}
    - {name: bob, role: user}
checks:
  - id: has_admin
    path: $.users
    include:
      - {name: alice, role: admin}
  - id: no_root
    path: $.users[*].name
    exclude: root
"""


def _errors(result):
    return {(e.path, e.message) for e in result.errors}


# --- loading ---


def test_load_valid_suite(tmp_yaml):
    suite, result = load_suite(tmp_yaml(VALID_SUITE))

    assert result.is_valid, str(result)
    assert suite.name == "Users"
    assert suite.version == 1
    assert suite.data["users"][0]["name"] == "alice"
    assert [c.id for c in suite.checks] == ["has_admin", "no_root"]
    assert suite.defaults.diff is True
    assert suite.defaults.fail_fast is False


def test_scalar_item_is_wrapped_in_a_list(tmp_yaml):
    suite, _ = load_suite(tmp_yaml(VALID_SUITE))
    check = suite.checks[1]

    assert check.mode == CheckMode.EXCLUDE
    assert check.negate is True
    assert check.expected == ["root"]
    assert check.raw_expected == ["root"]


def test_path_defaults_to_root():
    suite, result = validate_suite_yaml("""
version: 1
name: t
data: [1, 2]
checks:
  - id: c
    include: [1]
""")
    assert result.is_valid
    assert suite.checks[0].path == "$"


def test_missing_file(tmp_path):
    suite, result = load_suite(tmp_path / "nope.yaml")
    assert suite is None
    assert result.errors[0].message == "File not found"


def test_invalid_yaml(tmp_yaml):
    suite, result = load_suite(tmp_yaml("name: [unclosed"))
    assert suite is None
    assert "Invalid YAML syntax" in result.errors[0].message


def test_top_level_must_be_an_object():
    suite, result = validate_suite_yaml("- 1\n- 2\n")
    assert suite is None
    assert not result.is_valid


# --- data files ---


def test_data_file_json(tmp_yaml, tmp_path):
    (tmp_path / "payload.json").write_text(json.dumps({"tags": ["a", "b"]}))
    suite, result = load_suite(tmp_yaml("""
    version: 1
    name: file
    data_file: payload.json
    checks:
      - id: tags
        path: $.tags
        include: [a]
    """))

    assert result.is_valid, str(result)
    assert suite.data == {"tags": ["a", "b"]}
    assert suite.data_file == tmp_path / "payload.json"


def test_data_file_yaml(tmp_yaml):
    tmp_yaml("tags: [x]\n", name="payload.yml")
    suite, result = load_suite(tmp_yaml("""
    version: 1
    name: file
    data_file: payload.yml
    checks:
      - id: tags
        include: [tags]
    """))
    assert result.is_valid, str(result)
    assert suite.data == {"tags": ["x"]}


def test_data_file_not_found(tmp_yaml):
    suite, result = load_suite(tmp_yaml("""
    version: 1
    name: file
    data_file: missing.json
    checks:
      - id: c
        include: [a]
    """))
    assert suite is None
    assert ("data_file", "File not found") in _errors(result)


def test_data_file_invalid_json(tmp_yaml, tmp_path):
    (tmp_path / "bad.json").write_text("{not json")
    suite, result = load_suite(tmp_yaml("""
    version: 1
    name: file
    data_file: bad.json
    checks:
      - id: c
        include: [a]
    """))
    assert suite is None
    assert result.errors[0].path == "data_file"
    assert "Invalid JSON" in result.errors[0].message


# --- validation ---


def test_missing_required_fields():
    _, result = validate_suite_yaml("data: {}\n")
    errors = _errors(result)
    assert ("version", "Required field 'version' is missing") in errors
    assert ("name", "Required field 'name' is missing") in errors
    assert ("checks", "Required field 'checks' is missing") in errors


def test_unknown_top_level_field():
    _, result = validate_suite_yaml("""
version: 1
name: t
data: []
checks: [{id: c, include: [1]}]
extra: true
""")
    assert ("extra", "Unknown top-level field 'extra'") in _errors(result)


def test_data_and_data_file_are_exclusive():
    _, result = validate_suite_yaml("""
version: 1
name: t
data: []
data_file: x.json
checks: [{id: c, include: [1]}]
""")
    assert ("data_file", "Cannot be combined with 'data'") in _errors(result)


def test_no_data():
    _, result = validate_suite_yaml("""
version: 1
name: t
checks: [{id: c, include: [1]}]
""")
    assert ("data", "Suite has no data to check") in _errors(result)


def test_check_errors():
    _, result = validate_suite_yaml("""
version: 1
name: t
data: []
checks:
  - id: dup
    include: [1]
  - id: dup
    include: [1]
  - id: both
    include: [1]
    exclude: [2]
  - id: empty
    include: []
  - id: bogus
    include: [1]
    timeout: 5
""")
    errors = _errors(result)
    assert ("checks[1].id", "Duplicate check id") in errors
    assert ("checks[2]", "Check requires exactly one of 'include' or 'exclude'") in errors
    assert ("checks[3].include", "Must list at least one expected item") in errors
    assert ("checks[4].timeout", "Unknown check field") in errors


def test_defaults_must_be_booleans():
    _, result = validate_suite_yaml("""
version: 1
name: t
data: []
defaults:
  diff: "yes"
  retries: 3
checks: [{id: c, include: [1]}]
""")
    errors = _errors(result)
    assert ("defaults.diff", "Must be a boolean") in errors
    assert ("defaults.retries", "Unknown default") in errors


def test_matcher_spec_errors():
    _, result = validate_suite_yaml("""
version: 1
name: t
data: []
checks:
  - id: c
    include:
      - {$within: {delta: x, of: 3}}
      - {$matches: "("}
      - {$nope: 1}
      - {$contains: a, extra: b}
""")
    errors = _errors(result)
    assert ("checks[0].include[0].$within.delta", "Must be a number") in errors
    assert any(p == "checks[0].include[1].$matches" and m.startswith("Invalid regular expression")
               for p, m in errors)
    assert ("checks[0].include[2].$nope", "Unknown matcher") in errors
    assert ("checks[0].include[3]", "Matcher spec must have exactly one key") in errors


# --- matcher specs ---


MATCHER_SUITE = """
version: 1
name: matchers
data: {}
checks:
  - id: c
    include:
      - {$within: {delta: 5, of: 24}}
      - {$contains: ar}
      - {$matches: "^fo+"}
      - {$lt: 90}
      - {$ge: 150}
      - {$anything: null}
      - {$include: [a, b]}
      - {name: {$matches: "^a"}, role: admin}
"""


def test_matcher_specs_build_matchers():
    suite, result = validate_suite_yaml(MATCHER_SUITE)
    assert result.is_valid, str(result)

    expected = suite.checks[0].expected
    assert [e.description for e in expected[:6]] == [
        "a value within 5 of 24",
        "a string containing 'ar'",
        "a string matching /^fo+/",
        "a value < 90",
        "a value >= 150",
        "anything",
    ]
    assert isinstance(expected[6], IncludeMatcher)
    assert expected[6].expected_items == ("a", "b")

    partial = expected[7]
    assert partial["role"] == "admin"
    assert is_matcher(partial["name"])


def test_raw_expected_keeps_yaml_form():
    suite, _ = validate_suite_yaml(MATCHER_SUITE)
    assert suite.checks[0].raw_expected[1] == {"$contains": "ar"}


# --- env interpolation ---


def test_env_interpolation(monkeypatch):
    monkeypatch.setenv("CONTAINMENT_TEST_ROLE", "admin")
    suite, result = validate_suite_yaml("""
version: 1
name: env
env:
  USER: alice
data: {}
checks:
  - id: c
    include:
      - "{{env.USER}}"
      - {role: "{{env.CONTAINMENT_TEST_ROLE}}"}
      - {$contains: "{{env.USER}}"}
      - "{{env.CONTAINMENT_UNSET_VAR}}"
""")
    assert result.is_valid, str(result)

    expected = suite.checks[0].expected
    assert expected[0] == "alice"
    assert expected[1] == {"role": "admin"}
    assert expected[2].description == "a string containing 'alice'"
    assert expected[3] == "{{env.CONTAINMENT_UNSET_VAR}}"
