"""
Tests for IniScanner and unit file suffix detection.
"""

import pytest

from unitref_analyzer import IniScanner, Triple, WarningCollector, is_unit_file


class TestIniScanner:
    """Test cases for IniScanner."""

    def setup_method(self):
        self.warnings = WarningCollector()
        self.scanner = IniScanner(self.warnings)

    def scan(self, text):
        return list(self.scanner.scan(text))

    def test_sections_and_keys(self):
        triples = self.scan(
            "[Unit]\n"
            "Description=OpenSSH server\n"
            "After=network.target\n"
            "\n"
            "[Install]\n"
            "WantedBy=multi-user.target\n"
        )

        assert triples == [
            Triple("Unit", "Description", "OpenSSH server", 2),
            Triple("Unit", "After", "network.target", 3),
            Triple("Install", "WantedBy", "multi-user.target", 6),
        ]

    def test_comments_and_blank_lines_skipped(self):
        triples = self.scan("# comment\n; other\n\n[Unit]\n  # indented\nWants=a\n")

        assert [(t.key, t.value) for t in triples] == [("Wants", "a")]

    def test_bare_key_has_no_value(self):
        triples = self.scan("[Service]\nRemainAfterExit\n")

        assert triples[0].value is None

    def test_empty_value_is_empty_string(self):
        triples = self.scan("[Unit]\nAfter=\n")

        assert triples[0].value == ""

    def test_keys_before_first_section(self):
        triples = self.scan("Requires=a.service\n")

        assert triples[0].section == ""

    def test_whitespace_around_key_and_value_stripped(self):
        triples = self.scan("[Unit]\n  After =  a.service b.service  \n")

        assert triples[0].key == "After"
        assert triples[0].value == "a.service b.service"

    def test_value_keeps_later_equals_signs(self):
        triples = self.scan("[Service]\nEnvironment=A=1\n")

        assert triples[0].value == "A=1"

    def test_case_preserved(self):
        triples = self.scan("[unit]\nafter=A.Service\n")

        assert triples[0] == Triple("unit", "after", "A.Service", 2)

    def test_line_continuation(self):
        triples = self.scan("[Unit]\nAfter=a.service \\\n  b.service\nWants=c\n")

        assert triples[0] == Triple("Unit", "After", "a.service b.service", 2)
        assert triples[1] == Triple("Unit", "Wants", "c", 4)

    def test_comment_inside_continuation_dropped(self):
        triples = self.scan("[Unit]\nAfter=a \\\n# note\n b\n")

        assert triples[0].value == "a b"

    def test_only_newline_ends_a_line(self):
        triples = self.scan("[Unit]\nAfter=a.service\x0cb.service\x0bc\u2028d\n")

        assert triples == [
            Triple("Unit", "After", "a.service\x0cb.service\x0bc\u2028d", 2)
        ]

    def test_crlf_line_endings(self):
        triples = self.scan("[Unit]\r\nAfter=a.service\r\n")

        assert triples[0].value == "a.service"

    def test_unterminated_section_recorded(self):
        triples = self.scan("[Unit\nAfter=a\n")

        assert triples == [Triple("", "After", "a", 2)]
        assert len(self.warnings) == 1
        assert self.warnings.get_all()[0].line_number == 1

    def test_missing_key_recorded(self):
        triples = self.scan("[Unit]\n=a.service\n")

        assert triples == []
        assert "missing key" in self.warnings.get_all()[0].message

    def test_feed_pushes_in_order(self):
        seen = []

        count = self.scanner.feed("[Unit]\nA=1\nB=2\n", seen.append)

        assert count == 2
        assert [t.key for t in seen] == ["A", "B"]

    def test_default_warning_collector(self):
        scanner = IniScanner()
        list(scanner.scan("[Broken\n"))

        assert len(scanner.warnings) == 1


class TestIsUnitFile:
    """Test cases for is_unit_file."""

    @pytest.mark.parametrize(
        "name",
        [
            "sshd.service",
            "dbus.socket",
            "multi-user.target",
            "fstrim.timer",
            "home.mount",
            "proc-sys-fs-binfmt_misc.automount",
            "cups.path",
            "user.slice",
            "session-1.scope",
            "dev-sda.device",
            "swapfile.swap",
            "old.snapshot",
            "foo.unit",
            "foo.time",
            "/etc/systemd/system/getty@tty1.service",
        ],
    )
    def test_unit_suffixes(self, name):
        assert is_unit_file(name)

    @pytest.mark.parametrize(
        "name", ["sshd.service.bak", "README", "unit.conf", "A.SERVICE", ".service"]
    )
    def test_non_unit_files(self, name):
        assert not is_unit_file(name)
