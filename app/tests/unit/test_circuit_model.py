"""Tests for models/circuit.py - the circuit document."""

from models.circuit import CircuitModel
from models.component import ComponentInstance
from models.identifiers import IdentifierAllocator
from models.kinds import ComponentKind, IdentifierFamily


def _wire(model, start, end):
    return ComponentInstance.create_segment(start, end, ComponentKind.WIRE, model.allocator)


class TestAppendAndRemove:
    def test_append_preserves_order(self):
        model = CircuitModel()
        first = _wire(model, (0, 0), (1, 0))
        second = _wire(model, (1, 0), (2, 0))
        model.append(first)
        model.append(second)
        assert list(model) == [first, second]
        assert len(model) == 2
        assert model[1] is second

    def test_remove_at_returns_instance(self, amplifier_circuit):
        removed = amplifier_circuit.remove_at(2)
        assert removed.kind is ComponentKind.GROUND
        assert len(amplifier_circuit) == 4

    def test_remove_at_out_of_range_is_noop(self, amplifier_circuit):
        assert amplifier_circuit.remove_at(5) is None
        assert amplifier_circuit.remove_at(-1) is None
        assert len(amplifier_circuit) == 5

    def test_remove_does_not_roll_back_identifiers(self, amplifier_circuit):
        amplifier_circuit.remove_at(4)
        q = ComponentInstance.create_point((0, 0), ComponentKind.NPN, amplifier_circuit.allocator)
        assert q.identifier == 3

    def test_remove_keeps_other_identifiers_and_templates(self):
        model = CircuitModel()
        for x in (0, 2, 4):
            model.append(ComponentInstance.create_point((x, 0), ComponentKind.NPN, model.allocator))
        before = [(c.identifier, c.code_template) for c in model][1:]
        model.remove_at(0)
        assert [(c.identifier, c.code_template) for c in model] == before
        assert before == [(2, "node[npn](Q2){Q2}"), (3, "node[npn](Q3){Q3}")]

    def test_replace_at(self, amplifier_circuit):
        replacement = _wire(amplifier_circuit, (0, 0), (0, 1))
        assert amplifier_circuit.replace_at(0, replacement)
        assert amplifier_circuit[0] is replacement
        assert not amplifier_circuit.replace_at(9, replacement)


class TestClear:
    def test_clear_empties_and_resets_counters(self, amplifier_circuit):
        amplifier_circuit.clear()
        assert len(amplifier_circuit) == 0
        assert amplifier_circuit.allocator.peek(IdentifierFamily.TRANSISTOR) == 1
        assert amplifier_circuit.allocator.peek(IdentifierFamily.OPAMP) == 1

    def test_documents_own_their_allocator(self):
        first = CircuitModel()
        second = CircuitModel()
        assert first.allocator is not second.allocator
        first.allocator.next(IdentifierFamily.TRANSISTOR)
        assert second.allocator.peek(IdentifierFamily.TRANSISTOR) == 1

    def test_accepts_external_allocator(self):
        allocator = IdentifierAllocator()
        model = CircuitModel(allocator=allocator)
        assert model.allocator is allocator


class TestSummaries:
    def test_summaries_in_order(self, amplifier_circuit):
        assert amplifier_circuit.summaries() == [
            "R [0,0] to [2,0]",
            "NPN Transistor [3,2]",
            "GND [3,4]",
            "3T OpAmp [6,2]",
            "NPN Transistor [8,2]",
        ]

    def test_empty_document(self):
        assert CircuitModel().summaries() == []


class TestClosestIndex:
    def test_empty_document_returns_none(self):
        assert CircuitModel().closest_index((0, 0)) is None

    def test_nearest_point_instance(self, amplifier_circuit):
        assert amplifier_circuit.closest_index((3, 3.9)) == 2
        assert amplifier_circuit.closest_index((7.9, 2.2)) == 4

    def test_segments_measured_from_midpoint(self):
        model = CircuitModel()
        model.append(_wire(model, (0, 0), (10, 0)))
        model.append(ComponentInstance.create_point((1, 0), ComponentKind.GROUND, model.allocator))
        # (5, 1) is 1 from the wire midpoint and ~4.1 from the ground
        assert model.closest_index((5, 1)) == 0

    def test_midpoint_uses_both_coordinates(self):
        model = CircuitModel()
        model.append(_wire(model, (0, 0), (0, 8)))
        model.append(ComponentInstance.create_point((3, 0), ComponentKind.VCC, model.allocator))
        # Wire midpoint is (0, 4); a midpoint mixing start.x with end.y would be (0, 8)
        assert model.closest_index((0, 4)) == 0

    def test_ties_keep_first(self):
        model = CircuitModel()
        model.append(ComponentInstance.create_point((0, 0), ComponentKind.GROUND, model.allocator))
        model.append(ComponentInstance.create_point((2, 0), ComponentKind.GROUND, model.allocator))
        assert model.closest_index((1, 0)) == 0


class TestContainsFet:
    def test_bjt_only(self, amplifier_circuit):
        assert not amplifier_circuit.contains_fet()

    def test_with_pmos(self, amplifier_circuit):
        amplifier_circuit.append(
            ComponentInstance.create_point((0, 0), ComponentKind.PMOS, amplifier_circuit.allocator)
        )
        assert amplifier_circuit.contains_fet()
