"""npm package name handling for override keys.

Override keys may carry a version selector (``lodash@4.17.21``) and may be
scoped (``@types/node``, ``@babel/core@7.20.0``). The registry only knows the
bare name, so links are built from the normalized form.
"""

from urllib.parse import quote

from pnpm_overrides.utils.constants import NPM_PACKAGE_URL

# Characters JavaScript's encodeURIComponent leaves untouched besides
# alphanumerics and "-_.~", which quote() never escapes.
_URI_COMPONENT_SAFE = "!*'()"


def extract_package_name(override_key: str) -> str:
    """Return the package name an override key refers to.

    Examples:
        >>> extract_package_name("lodash@4.17.21")
        'lodash'
        >>> extract_package_name("@types/node")
        '@types/node'
        >>> extract_package_name("@scope/package@1.0.0@beta")
        '@scope/package'
    """
    if override_key.startswith("@"):
        parts = override_key.split("@")
        if len(parts) == 2:
            # "@types/node": scope and name only
            return override_key
        if len(parts) >= 3:
            return f"@{parts[1]}"
    else:
        return override_key.split("@")[0]

    return override_key


def encode_uri_component(value: str) -> str:
    """Percent-encode a value the way encodeURIComponent does."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


def registry_url(override_key: str) -> str:
    """Link to the npm registry page for the package behind an override key."""
    return NPM_PACKAGE_URL + encode_uri_component(extract_package_name(override_key))
