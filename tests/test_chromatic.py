import unittest

from scalegen.theory.chromatic import (
    CHROMATIC_FLAT,
    CHROMATIC_SHARP,
    FLAT,
    SHARP,
    chromatic_scale,
    find_chromatic_scale,
    flat_chromatic_scale,
    normalize_tonic,
    scale,
    select_spelling,
    semitones,
    step,
    wrap_index,
)
from scalegen.theory.errors import InvalidStepCodeError, ScaleError, TonicNotFoundError


class StepTests(unittest.TestCase):
    def test_steps_from_d(self) -> None:
        full = chromatic_scale("C")
        self.assertEqual(step(full, "D", "m"), "D#")
        self.assertEqual(step(full, "D", "M"), "E")
        self.assertEqual(step(full, "D", "A"), "F")

    def test_wraps_past_end_of_table(self) -> None:
        self.assertEqual(step(CHROMATIC_SHARP, "B", "m"), "C")
        self.assertEqual(step(CHROMATIC_SHARP, "A#", "A"), "C#")
        self.assertEqual(step(CHROMATIC_FLAT, "Bb", "M"), "C")

    def test_result_is_member_and_additive(self) -> None:
        for tonic in CHROMATIC_SHARP:
            for code in ("m", "M", "A"):
                self.assertIn(step(CHROMATIC_SHARP, tonic, code), CHROMATIC_SHARP)
            twice = step(CHROMATIC_SHARP, step(CHROMATIC_SHARP, tonic, "M"), "M")
            i = CHROMATIC_SHARP.index(tonic)
            self.assertEqual(twice, CHROMATIC_SHARP[(i + 4) % 12])

    def test_unknown_tonic_raises(self) -> None:
        with self.assertRaises(TonicNotFoundError) as ctx:
            step(CHROMATIC_FLAT, "C#", "m")
        self.assertEqual(ctx.exception.tonic, "C#")

    def test_unknown_step_code_raises(self) -> None:
        with self.assertRaises(InvalidStepCodeError):
            step(CHROMATIC_SHARP, "C", "x")
        with self.assertRaises(ValueError):
            semitones("P")

    def test_wrap_index(self) -> None:
        self.assertEqual(wrap_index(CHROMATIC_SHARP, 13), 1)
        self.assertEqual(wrap_index(CHROMATIC_SHARP, 11), 11)


class ChromaticScaleTests(unittest.TestCase):
    def test_sharp_from_c(self) -> None:
        self.assertEqual(
            chromatic_scale("C"),
            ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B", "C"],
        )

    def test_default_tonic_is_c(self) -> None:
        self.assertEqual(chromatic_scale(), chromatic_scale("C"))
        self.assertEqual(flat_chromatic_scale(), flat_chromatic_scale("C"))

    def test_flat_from_c(self) -> None:
        self.assertEqual(
            flat_chromatic_scale("C"),
            ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B", "C"],
        )

    def test_sharp_from_d_rotates(self) -> None:
        self.assertEqual(
            chromatic_scale("D"),
            ["D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B", "C", "C#", "D"],
        )

    def test_lowercase_tonic_is_capitalized(self) -> None:
        self.assertEqual(chromatic_scale("a"), chromatic_scale("A"))
        self.assertEqual(flat_chromatic_scale("bb")[0], "Bb")
        self.assertEqual(flat_chromatic_scale("bb")[-1], "Bb")

    def test_thirteen_notes_first_equals_last(self) -> None:
        for tonic in CHROMATIC_SHARP:
            notes = chromatic_scale(tonic)
            self.assertEqual(len(notes), 13)
            self.assertEqual(notes[0], notes[-1])
            self.assertEqual(notes[0], tonic)

    def test_flat_table_rejects_sharp_tonic(self) -> None:
        with self.assertRaises(TonicNotFoundError):
            flat_chromatic_scale("C#")

    def test_malformed_tonic_raises(self) -> None:
        with self.assertRaises(ScaleError):
            chromatic_scale("H")
        with self.assertRaises(ScaleError):
            chromatic_scale("")

    def test_every_note_is_a_valid_step_tonic(self) -> None:
        for notes, table in ((chromatic_scale("E"), CHROMATIC_SHARP), (flat_chromatic_scale("Gb"), CHROMATIC_FLAT)):
            for note in notes:
                self.assertIn(step(table, note, "m"), table)

    def test_results_are_fresh_lists(self) -> None:
        first = chromatic_scale("C")
        first.append("X")
        self.assertEqual(len(chromatic_scale("C")), 13)


class SpellingTests(unittest.TestCase):
    def test_flat_allow_list(self) -> None:
        for tonic in ("F", "Bb", "Eb", "Ab", "Db", "Gb", "d", "g", "c", "f", "bb", "eb"):
            self.assertEqual(select_spelling(tonic), FLAT, tonic)

    def test_case_sensitive(self) -> None:
        self.assertEqual(select_spelling("D"), SHARP)
        self.assertEqual(select_spelling("d"), FLAT)
        self.assertEqual(select_spelling("C"), SHARP)
        self.assertEqual(select_spelling("f#"), SHARP)

    def test_find_chromatic_scale(self) -> None:
        self.assertEqual(find_chromatic_scale("F"), flat_chromatic_scale("F"))
        self.assertEqual(find_chromatic_scale("D"), chromatic_scale("D"))
        self.assertEqual(find_chromatic_scale("d"), flat_chromatic_scale("D"))
        self.assertEqual(find_chromatic_scale("C#"), chromatic_scale("C#"))

    def test_find_chromatic_scale_lowercase_flat_keys(self) -> None:
        self.assertEqual(find_chromatic_scale("bb"), flat_chromatic_scale("Bb"))
        self.assertEqual(find_chromatic_scale("eb"), flat_chromatic_scale("Eb"))
        self.assertEqual(find_chromatic_scale("bb")[1], "B")
        self.assertEqual(find_chromatic_scale("eb")[1], "E")

    def test_normalize_is_idempotent(self) -> None:
        self.assertEqual(normalize_tonic("Bb"), "Bb")
        self.assertEqual(normalize_tonic(normalize_tonic("bb")), "Bb")
        self.assertEqual(normalize_tonic("f#"), "F#")


class ScaleTests(unittest.TestCase):
    def test_c_major(self) -> None:
        self.assertEqual(scale("C", "MMmMMMm"), ["C", "D", "E", "F", "G", "A", "B", "C"])

    def test_length_is_pattern_plus_one(self) -> None:
        self.assertEqual(len(scale("G", "MMAMA")), 6)
        self.assertEqual(scale("G", ""), ["G"])

    def test_sharp_key(self) -> None:
        self.assertEqual(scale("G", "MMmMMMm"), ["G", "A", "B", "C", "D", "E", "F#", "G"])

    def test_flat_key(self) -> None:
        self.assertEqual(scale("F", "MMmMMMm"), ["F", "G", "A", "Bb", "C", "D", "E", "F"])

    def test_minor_key_lowercase_uses_flats(self) -> None:
        self.assertEqual(scale("d", "MmMMmMM"), ["D", "E", "F", "G", "A", "Bb", "C", "D"])
        self.assertEqual(scale("f#", "MmMMmMM"), ["F#", "G#", "A", "B", "C#", "D", "E", "F#"])

    def test_harmonic_minor_with_augmented_second(self) -> None:
        self.assertEqual(scale("A", "MmMMmAm"), ["A", "B", "C", "D", "E", "F", "G#", "A"])

    def test_cumulative_offset_wraps(self) -> None:
        self.assertEqual(scale("C", "mmmmmmmmmmmmmm"), chromatic_scale("C") + ["C#", "D"])

    def test_invalid_step_code(self) -> None:
        with self.assertRaises(InvalidStepCodeError) as ctx:
            scale("C", "MMxM")
        self.assertEqual(ctx.exception.step, "x")

    def test_tonic_missing_from_selected_table(self) -> None:
        # "db" is not on the flat allow-list, and "Db" is not in the sharp table
        with self.assertRaises(TonicNotFoundError):
            scale("db", "MMmMMMm")


if __name__ == "__main__":
    unittest.main()
