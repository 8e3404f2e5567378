"""
Tests for UnitDependencyGraph.
"""

from unitref_analyzer import Relationship, UnitDependencyGraph, UnitReference


class TestUnitDependencyGraph:
    """Test cases for UnitDependencyGraph."""

    def setup_method(self):
        self.graph = UnitDependencyGraph()
        self.graph.add_unit("sshd.service", "/etc/systemd/system/sshd.service")
        self.graph.add_references(
            "sshd.service",
            [
                UnitReference("network.target", Relationship.AFTER),
                UnitReference("sshd-keygen.target", Relationship.WANTS),
                UnitReference("sshd-keygen.target", Relationship.AFTER),
                UnitReference("multi-user.target", Relationship.WANTED_BY),
            ],
        )
        self.graph.add_reference(
            "cron.service", UnitReference("multi-user.target", Relationship.WANTED_BY)
        )

    def test_dependencies_of(self):
        assert self.graph.dependencies_of("sshd.service") == [
            "network.target",
            "sshd-keygen.target",
            "multi-user.target",
        ]

    def test_dependencies_filtered_by_relationship(self):
        assert self.graph.dependencies_of(
            "sshd.service", Relationship.AFTER
        ) == ["network.target", "sshd-keygen.target"]

    def test_dependents_of(self):
        assert self.graph.dependents_of("multi-user.target") == [
            "sshd.service",
            "cron.service",
        ]
        assert self.graph.dependents_of(
            "sshd-keygen.target", Relationship.WANTS
        ) == ["sshd.service"]

    def test_unknown_unit(self):
        assert self.graph.dependencies_of("nope.service") == []
        assert self.graph.dependents_of("nope.service") == []

    def test_parallel_edges_kept(self):
        assert sorted(
            self.graph.relationships_between("sshd.service", "sshd-keygen.target")
        ) == ["After", "Wants"]
        assert self.graph.relationships_between("network.target", "sshd.service") == []

    def test_duplicate_reference_kept(self):
        self.graph.add_reference(
            "sshd.service", UnitReference("network.target", Relationship.AFTER)
        )

        assert self.graph.relationships_between(
            "sshd.service", "network.target"
        ) == ["After", "After"]

    def test_to_dict(self):
        data = self.graph.to_dict()

        nodes = {node["id"]: node for node in data["nodes"]}
        assert nodes["sshd.service"]["scanned"] is True
        assert nodes["cron.service"]["scanned"] is False
        assert len(data["edges"]) == 5

    def test_statistics(self):
        stats = self.graph.get_statistics()

        assert stats["total_units"] == 5
        assert stats["scanned_units"] == 1
        assert stats["total_references"] == 5
        assert stats["WantedBy"] == 2
        assert stats["Requires"] == 0

    def test_to_dot(self):
        dot = self.graph.to_dot()

        assert dot.startswith("digraph units {")
        assert '"sshd.service" -> "network.target" [label="After"];' in dot

    def test_to_dot_escapes_quotes_and_backslashes(self):
        graph = UnitDependencyGraph()
        graph.add_reference(
            "x.service", UnitReference('a"b\\c.service', Relationship.AFTER)
        )

        dot = graph.to_dot()

        assert '"x.service" -> "a\\"b\\\\c.service" [label="After"];' in dot
