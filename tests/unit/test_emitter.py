"""Tests for InstructionEmitter: emission, backpatching and list merging."""

from switchtac.emitter import InstructionEmitter
from switchtac.ir import Opcode


class TestEmit:
    def test_indices_are_dense_from_zero(self):
        emitter = InstructionEmitter()
        indices = [emitter.emit(Opcode.OPAQUE, text=f"s{i}") for i in range(4)]
        assert indices == [0, 1, 2, 3]
        assert emitter.current_address == 4

    def test_current_address_is_next_index(self):
        emitter = InstructionEmitter()
        assert emitter.current_address == 0
        emitter.emit_jump()
        assert emitter.current_address == 1

    def test_lines_are_prefixed_with_index(self):
        emitter = InstructionEmitter()
        emitter.emit(Opcode.COPY, result="x", operands=["1"])
        emitter.emit_jump()
        assert emitter.lines() == ["0: x = 1", "1: goto __"]

    def test_quads_returns_copy_of_sequence(self):
        emitter = InstructionEmitter()
        emitter.emit_jump()
        emitter.quads.clear()
        assert emitter.current_address == 1


class TestBackpatch:
    def test_backpatch_resolves_every_listed_jump(self):
        emitter = InstructionEmitter()
        first = emitter.emit_jump()
        emitter.emit(Opcode.OPAQUE, text="call()")
        second = emitter.emit_jump()
        emitter.backpatch([first, second], 9)
        assert emitter.lines() == ["0: goto 9", "1: call()", "2: goto 9"]
        assert emitter.unresolved() == []

    def test_backpatch_leaves_unlisted_jumps_alone(self):
        emitter = InstructionEmitter()
        emitter.emit_jump()
        other = emitter.emit_jump()
        emitter.backpatch([0], 5)
        assert emitter.unresolved() == [other]

    def test_out_of_range_indices_are_skipped(self):
        emitter = InstructionEmitter()
        emitter.emit_jump()
        emitter.backpatch([0, 7, -1], 3)
        assert emitter.lines() == ["0: goto 3"]

    def test_resolved_jump_is_not_patched_again(self):
        emitter = InstructionEmitter()
        emitter.emit_jump()
        emitter.backpatch([0], 3)
        emitter.backpatch([0], 8)
        assert emitter.lines() == ["0: goto 3"]

    def test_backpatch_ignores_placeholder_lookalike_text(self):
        emitter = InstructionEmitter()
        emitter.emit(Opcode.OPAQUE, text="goto __")
        emitter.backpatch([0], 4)
        assert emitter.lines() == ["0: goto __"]

    def test_backpatch_none_list_is_noop(self):
        emitter = InstructionEmitter()
        emitter.emit_jump()
        emitter.backpatch(None, 1)
        assert emitter.unresolved() == [0]


class TestMerge:
    def test_merge_concatenates_in_order(self):
        assert InstructionEmitter.merge([3, 1], [2]) == [3, 1, 2]

    def test_merge_tolerates_missing_operands(self):
        assert InstructionEmitter.merge(None, [2]) == [2]
        assert InstructionEmitter.merge([1], None) == [1]
        assert InstructionEmitter.merge(None, None) == []
        assert InstructionEmitter.merge([], []) == []

    def test_merge_does_not_deduplicate(self):
        assert InstructionEmitter.merge([1], [1]) == [1, 1]

    def test_merge_does_not_alias_inputs(self):
        first = [1]
        merged = InstructionEmitter.merge(first, [2])
        merged.append(3)
        assert first == [1]

    def test_make_list(self):
        assert InstructionEmitter.make_list(4) == [4]


class TestTrace:
    def test_log_appends_in_order(self):
        emitter = InstructionEmitter()
        emitter.log("a")
        emitter.log("b")
        assert emitter.logs == ["a", "b"]
