"""Auto-discovery of command modules.

Every .py file in this package that defines a `command` object is
auto-registered by mpd_palette.registry.discover().

The explicit imports below keep these modules visible to freezers such as
PyInstaller, where pkgutil.iter_modules cannot list them at runtime.
"""

# Hidden imports: keep this list in sync with command modules
import mpd_palette.commands.distances as _distances  # noqa: F401
import mpd_palette.commands.filter as _filter  # noqa: F401
import mpd_palette.commands.score as _score  # noqa: F401
import mpd_palette.commands.select as _select  # noqa: F401
