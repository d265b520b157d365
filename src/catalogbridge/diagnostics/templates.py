"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def catalog_not_object(source_path: str, found_type: str) -> Diagnostic:
        """Catalog file does not contain a JSON object.

        Args:
            source_path: Catalog file path
            found_type: Python type name of the decoded document
        """
        return Diagnostic(
            code=DiagnosticCode.CATALOG_NOT_OBJECT,
            message=f"Catalog must be an object of message ids, got {found_type}",
            hint="Use a flat JSON object mapping message ids to strings",
            source_path=source_path,
        )

    @staticmethod
    def catalog_value_not_string(
        namespace: str, key: str, found_type: str, source_path: str | None = None
    ) -> Diagnostic:
        """Catalog value is not a plain string.

        Args:
            namespace: Catalog namespace
            key: Message id whose value is invalid
            found_type: Python type name of the value
            source_path: Catalog file path (if known)
        """
        return Diagnostic(
            code=DiagnosticCode.CATALOG_VALUE_NOT_STRING,
            message=f"Catalog value for '{namespace}.{key}' is {found_type}, expected a string",
            hint="Catalog values must be plain strings; nested objects are not supported",
            source_path=source_path,
            namespace=namespace,
            key=key,
        )

    @staticmethod
    def catalog_value_empty(
        namespace: str, key: str, source_path: str | None = None
    ) -> Diagnostic:
        """Catalog value is an empty string."""
        return Diagnostic(
            code=DiagnosticCode.CATALOG_VALUE_EMPTY,
            message=f"Catalog value for '{namespace}.{key}' is empty",
            hint=(
                "Empty strings are rejected on top of the non-string check: "
                "every message needs non-empty source text to fall back to"
            ),
            source_path=source_path,
            namespace=namespace,
            key=key,
        )

    @staticmethod
    def catalog_key_invalid(namespace: str, key: object) -> Diagnostic:
        """Catalog key is not a non-empty string."""
        return Diagnostic(
            code=DiagnosticCode.CATALOG_KEY_INVALID,
            message=f"Catalog key {key!r} in namespace '{namespace}' is not a non-empty string",
            hint="Message ids must be non-empty strings",
            namespace=namespace,
        )

    @staticmethod
    def catalog_malformed(source_path: str, reason: str) -> Diagnostic:
        """Catalog file cannot be decoded."""
        return Diagnostic(
            code=DiagnosticCode.CATALOG_MALFORMED,
            message=f"Catalog cannot be decoded: {reason}",
            hint="Check that the file is valid UTF-8 JSON",
            source_path=source_path,
        )

    @staticmethod
    def source_too_large(source_path: str, size: int, limit: int) -> Diagnostic:
        """Input file exceeds the size limit."""
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=f"File is {size} bytes, limit is {limit}",
            source_path=source_path,
        )

    @staticmethod
    def view_not_resolvable(view: str, template: str | None) -> Diagnostic:
        """Non-redirect view has no existing template.

        Args:
            view: View identifier
            template: Template path that was checked (None if not declared)
        """
        where = "no template declared" if template is None else f"template '{template}' missing"
        return Diagnostic(
            code=DiagnosticCode.VIEW_NOT_RESOLVABLE,
            message=f"View '{view}' cannot be resolved: {where}",
            hint="Declare the route as a redirect or add the view template",
            source_path=template,
            key=view,
        )

    @staticmethod
    def view_id_invalid(path: str, view: object) -> Diagnostic:
        """Route carries a view identifier that cannot name a catalog."""
        return Diagnostic(
            code=DiagnosticCode.VIEW_ID_INVALID,
            message=f"Route '{path}' has invalid view identifier {view!r}",
            hint="View identifiers must be non-empty and contain no path separators or dots",
            key=path,
        )

    @staticmethod
    def manifest_malformed(source_path: str, reason: str) -> Diagnostic:
        """Route manifest has the wrong top-level shape."""
        return Diagnostic(
            code=DiagnosticCode.MANIFEST_MALFORMED,
            message=f"Route manifest is malformed: {reason}",
            hint='Use a JSON list of routes or {"routes": [...]}',
            source_path=source_path,
        )

    @staticmethod
    def route_malformed(index: int, reason: str) -> Diagnostic:
        """Single route entry is malformed."""
        return Diagnostic(
            code=DiagnosticCode.ROUTE_MALFORMED,
            message=f"Route #{index} is malformed: {reason}",
            hint="Each route needs 'path' and either 'redirect' or 'view' with 'template'",
            key=str(index),
        )

    @staticmethod
    def languages_malformed(source_path: str, reason: str) -> Diagnostic:
        """Language registry has the wrong shape."""
        return Diagnostic(
            code=DiagnosticCode.LANGUAGES_MALFORMED,
            message=f"Language registry is malformed: {reason}",
            hint='Use a JSON list of locale codes or {"source": "en", "languages": [...]}',
            source_path=source_path,
        )

    @staticmethod
    def languages_empty(source_path: str) -> Diagnostic:
        """Language registry declares no locales."""
        return Diagnostic(
            code=DiagnosticCode.LANGUAGES_EMPTY,
            message="Language registry declares no locales",
            source_path=source_path,
        )

    @staticmethod
    def translation_source_malformed(source_path: str, reason: str) -> Diagnostic:
        """PO file cannot be parsed."""
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_SOURCE_MALFORMED,
            message=f"Translation source cannot be parsed: {reason}",
            hint="Check the PO file with msgfmt --check",
            source_path=source_path,
        )
