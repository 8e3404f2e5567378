"""Version information."""

__version__ = "1.0.0"
__version_info__ = (1, 0, 0)

# Version history
CHANGELOG = """
# Changelog

## v1.0.0

**Unit Reference Extraction**

- Requires / Wants / After / Before / RequiredBy / WantedBy keys
- Comma and whitespace separated unit lists
- Reference toggle (--no-references)

**CLI**

- tags / json / table / pretty output
- Directory walking by unit file suffix
- Dependency graph export

### Known Limitations

- Template instances (foo@bar.service) are not resolved
- Unit aliases are not resolved
"""
