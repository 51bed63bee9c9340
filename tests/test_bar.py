"""
Tests for consolebar.bar — the ratio-to-text layout engine.

Covers:
  - Bar body layout:   widths, truncation, caps, multi-char tokens
  - Edge widths:       zero / undersized widths, out-of-range ratios
  - Validation:        token mismatch, no caching after a failed pass
  - Hooks:             ordering, context, generated length
  - Writes:            terminators and no partial frame on failure
"""

import logging
from dataclasses import replace

import pytest

from consolebar.bar import ProgressBar, RenderContext, percent_display
from consolebar.errors import ConfigurationError
from consolebar.style import BarStyle


# ── Bar body ──────────────────────────────────────────────────────────────────

class TestBuildBar:
    def test_half_full_width_10(self, ascii_style):
        bar = ProgressBar(ascii_style)
        assert bar.build(0.5, 10) == "[====    ]"

    def test_zero_is_all_unfilled(self):
        assert ProgressBar().build(0, 12) == "[" + " " * 10 + "]"

    def test_one_is_all_filled(self):
        assert ProgressBar().build(1, 12) == "[" + "=" * 10 + "]"

    @pytest.mark.parametrize("ratio", [0, 0.01, 0.33, 0.5, 0.999, 1])
    def test_length_is_independent_of_ratio(self, ratio):
        assert len(ProgressBar().build(ratio, 40)) == 40

    def test_filled_count_truncates(self):
        # 0.59 * 10 = 5.9 → 5 filled
        assert ProgressBar().build(0.59, 12) == "[=====     ]"

    def test_no_unfilled_zone(self):
        bar = ProgressBar(BarStyle(fill_unfilled_zone=False))
        assert bar.build(0.5, 10) == "[====]"

    def test_custom_caps_and_tokens(self):
        bar = ProgressBar(BarStyle(left_cap="<<", right_cap=">>", filled_token="#", unfilled_token="."))
        assert bar.build(0.25, 12) == "<<##......>>"

    def test_multichar_tokens(self):
        bar = ProgressBar(BarStyle(filled_token="==", unfilled_token="--"))
        # inner 10 → 5 slots; 0.4 → 2 filled, 3 unfilled
        assert bar.build(0.4, 12) == "[====------]"

    def test_idempotent(self):
        bar = ProgressBar()
        assert bar.build(0.37, 33) == bar.build(0.37, 33)


# ── Edge widths and ratios ────────────────────────────────────────────────────

class TestEdges:
    def test_zero_width_skips_bar(self):
        assert ProgressBar().build(0.5, 0) == ""

    def test_negative_width_skips_bar(self):
        assert ProgressBar().build(0.5, -4) == ""

    def test_width_smaller_than_caps_renders_caps_only(self):
        assert ProgressBar(BarStyle(left_cap="[[", right_cap="]]")).build(0.5, 3) == "[[]]"

    def test_width_exactly_caps(self):
        assert ProgressBar().build(1, 2) == "[]"

    def test_ratio_above_one_overfills(self):
        # 1.5 * 8 = 12 filled; unfilled clamps to zero
        assert ProgressBar().build(1.5, 10) == "[" + "=" * 12 + "]"

    def test_negative_ratio_clamps_filled(self):
        assert ProgressBar().build(-0.5, 10) == "[" + " " * 8 + "]"


# ── Validation ────────────────────────────────────────────────────────────────

class TestValidation:
    def test_mismatched_tokens_raise(self):
        bar = ProgressBar(BarStyle(filled_token="==", unfilled_token=" "))
        with pytest.raises(ConfigurationError):
            bar.build(0.5, 10)

    def test_failed_validation_is_not_cached(self):
        bar = ProgressBar(BarStyle(filled_token="==", unfilled_token=" "))
        for _ in range(2):
            with pytest.raises(ConfigurationError):
                bar.build(0.5, 10)
        assert bar.validated is False

    def test_empty_token_raises(self):
        bar = ProgressBar(BarStyle(filled_token="", unfilled_token=""))
        with pytest.raises(ConfigurationError):
            bar.build(0.5, 10)

    def test_success_marks_validated(self):
        bar = ProgressBar()
        bar.build(0, 10)
        assert bar.validated is True

    def test_new_style_is_revalidated(self):
        bar = ProgressBar()
        bar.build(0, 10)
        bar.style = replace(bar.style, filled_token="##")
        assert bar.validated is False
        with pytest.raises(ConfigurationError):
            bar.build(0, 10)

    def test_fixing_the_style_recovers(self):
        bar = ProgressBar(BarStyle(filled_token="##"))
        with pytest.raises(ConfigurationError):
            bar.build(0, 10)
        bar.style = BarStyle(filled_token="##", unfilled_token="  ")
        assert bar.build(1, 10) == "[########]"

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            ProgressBar(BarStyle(unfilled_token="--")).build(0, 10)


# ── Percent display ───────────────────────────────────────────────────────────

class TestPercentDisplay:
    @pytest.mark.parametrize("ratio", [0, 0.05, 0.5, 0.999, 1, -0.05, 1.5, 9.99])
    def test_width_is_fixed_while_text_fits(self, ratio):
        assert len(ProgressBar().percent_display(ratio)) == 7

    @pytest.mark.parametrize("ratio, text", [(-1, "-100.0 %"), (10, "1000.0 %")])
    def test_wider_values_overflow_rather_than_truncate(self, ratio, text):
        assert ProgressBar().percent_display(ratio) == text
        assert len(text) == 8

    def test_formats(self):
        bar = ProgressBar()
        assert bar.percent_display(0.05) == "  5.0 %"
        assert bar.percent_display(0.5) == " 50.0 %"
        assert bar.percent_display(1) == "100.0 %"

    def test_custom_format_and_width(self):
        style = BarStyle(percent_format="{:.0f}%", percent_width=4)
        assert percent_display(style, 0.42) == " 42%"

    def test_context_helper_matches(self):
        ctx = RenderContext(style=BarStyle(), ratio=0.25)
        assert ctx.percent_display() == " 25.0 %"


# ── Hooks ─────────────────────────────────────────────────────────────────────

class TestHooks:
    def test_pre_and_post_wrap_the_bar(self):
        bar = ProgressBar()
        bar.add_pre_hook(lambda ctx, b: b + "<")
        bar.add_post_hook(lambda ctx, b: b + ">")
        assert bar.build(1, 4) == "<[==]>"

    def test_hooks_run_in_registration_order(self):
        bar = ProgressBar()
        bar.add_pre_hook(lambda ctx, b: b + "a")
        bar.add_pre_hook(lambda ctx, b: b + "b")
        bar.add_post_hook(lambda ctx, b: b + "c")
        bar.add_post_hook(lambda ctx, b: b + "d")
        assert bar.build(0, 2) == "ab[]cd"

    def test_hooks_see_ratio_and_style(self):
        seen = []
        bar = ProgressBar()
        bar.add_post_hook(lambda ctx, b: seen.append(ctx) or b)
        bar.build(0.3, 10)
        assert seen[0].ratio == 0.3
        assert seen[0].style is bar.style

    def test_hooks_run_when_bar_is_skipped(self):
        bar = ProgressBar()
        bar.add_post_hook(lambda ctx, b: b + ctx.percent_display())
        assert bar.build(0.5, 0) == " 50.0 %"

    def test_generated_length_at_ratio_zero(self):
        bar = ProgressBar()
        bar.add_post_hook(lambda ctx, b: b + ctx.percent_display() + " ")
        assert bar.hook_generated_length(bar.post_hooks) == 8

    def test_generated_length_of_no_hooks(self):
        assert ProgressBar().hook_generated_length([]) == 0


# ── Writes ────────────────────────────────────────────────────────────────────

class TestWrites:
    def test_write_progress_has_no_terminator(self, buf):
        ProgressBar().write_progress(1, 4, file=buf)
        assert buf.getvalue() == "[==]"

    def test_write_progress_line_ends_with_newline(self, buf):
        ProgressBar().write_progress_line(1, 4, file=buf)
        assert buf.getvalue() == "[==]\n"

    def test_update_progress_ends_with_carriage_return(self, buf):
        bar = ProgressBar()
        bar.update_progress(0, 4, file=buf)
        bar.update_progress(1, 4, file=buf)
        assert buf.getvalue() == "[  ]\r[==]\r"
        assert "\n" not in buf.getvalue()

    def test_failed_build_writes_nothing(self, buf):
        bar = ProgressBar(BarStyle(filled_token="=="))
        bar.add_pre_hook(lambda ctx, b: b + "pre")
        with pytest.raises(ConfigurationError):
            bar.update_progress(0.5, 10, file=buf)
        assert buf.getvalue() == ""

    def test_defaults_to_stdout(self, capsys):
        ProgressBar().write_progress(0, 4)
        assert capsys.readouterr().out == "[  ]"


# ── Logging ───────────────────────────────────────────────────────────────────

class TestLogging:
    def test_clamping_is_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="consolebar.bar"):
            ProgressBar().build(1.5, 10)
        assert "Clamping unfilled count -4 to zero" in caplog.text

    def test_nothing_above_debug_on_a_normal_render(self, caplog):
        with caplog.at_level(logging.INFO, logger="consolebar"):
            ProgressBar().build(0.5, 10)
        assert caplog.records == []
