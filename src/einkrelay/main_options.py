"""Click helpers for the mutually exclusive run modes."""
import click


class MutuallyExclusiveOption(click.Option):
    """Click option that refuses to be combined with the options it names.

    Example:
        @click.option("--server", is_flag=True, cls=MutuallyExclusiveOption,
                      exclusive_with=["client"])
    """

    def __init__(self, *args, **kwargs):
        """Initialize with the exclusive_with list of option names."""
        self.exclusive_with = kwargs.pop("exclusive_with", [])
        super().__init__(*args, **kwargs)

    def handle_parse_result(self, ctx, opts, args):
        """Raise UsageError if a conflicting option was also given."""
        if self.name in opts:
            for other in self.exclusive_with:
                if other in opts:
                    raise click.UsageError(
                        f"Options --{self.name} and --{other} are mutually exclusive"
                    )
        return super().handle_parse_result(ctx, opts, args)


def require_one_of(**modes) -> None:
    """Raise UsageError unless at least one run mode was selected.

    Args:
        **modes: Option name to parsed value.

    Raises:
        click.UsageError: If every value is falsy.
    """
    if not any(modes.values()):
        names = " or ".join(f"--{name}" for name in modes)
        raise click.UsageError(f"Either {names} must be specified")
