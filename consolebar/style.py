"""
BarStyle — the visual configuration of a progress bar.

One immutable value per bar. Change it with dataclasses.replace() and
assign the new value to ProgressBar.style; the bar re-validates on the
next render.

    [=====================                   ]
    ^ left_cap          ^ filled    unfilled ^ right_cap
"""

from dataclasses import dataclass

from consolebar.errors import ConfigurationError


@dataclass(frozen=True)
class BarStyle:
    left_cap: str = "["
    right_cap: str = "]"
    filled_token: str = "="
    unfilled_token: str = " "
    fill_unfilled_zone: bool = True
    percent_format: str = "{:.1f} %"    # "50.0 %"
    percent_width: int = 7              # len("100.0 %")

    def validate(self) -> None:
        """
        Raise ConfigurationError unless both zone tokens are non-empty and
        of equal length. Unequal tokens would make the filled and unfilled
        zones disagree on how many slots the bar has.
        """
        if not self.filled_token or not self.unfilled_token:
            raise ConfigurationError("filled_token and unfilled_token must not be empty.")
        if len(self.filled_token) != len(self.unfilled_token):
            raise ConfigurationError(
                "filled_token and unfilled_token must be of equal length "
                f"(got {len(self.filled_token)} and {len(self.unfilled_token)})."
            )


DEFAULT_STYLE = BarStyle()
