"""Language Strings — centralized locale-specific text for the session list.

Invariants:
    - All strings are pure data (no IO, no computation beyond formatting)
    - Every key exists for every locale in Locale enum
    - get_string() never raises: unknown key → English text → the key itself
    - Category templates carry exactly one placeholder: {context}

Design Decisions:
    - Flat dotted keys (sessions.error.loading) so the controller can name a
      string without importing the table
    - English fallback for missing translations: a half-translated UI beats a raw key
"""

from enum import Enum


class Locale(str, Enum):
    """Supported UI locales (BCP 47 tags)."""
    EN = "en"
    PT_BR = "pt-BR"
    ES = "es"
    FR = "fr"
    DE = "de"


# --- Session list strings ------------------------------------------------------

_STRINGS: dict[Locale, dict[str, str]] = {
    Locale.EN: {
        "sessions.error.loading": "Failed to load sessions.",
        "sessions.error.not.found": "Session not found.",
        "sessions.error.deleting": "Failed to delete session.",
        "sessions.error.updating": "Failed to update session.",
        "sessions.error.rename.failed": "Could not rename session. The title may be empty or the session no longer exists.",
        "sessions.error.renaming": "Failed to rename session.",
        "error.database": "The session database is unavailable while {context}. Please try again.",
        "error.timeout": "The request timed out while {context}. Please try again.",
        "error.connection": "Could not reach the session store while {context}.",
        "error.not.found": "The requested item was not found while {context}.",
        "error.validation": "Invalid input while {context}.",
    },
    Locale.PT_BR: {
        "sessions.error.loading": "Falha ao carregar sessoes.",
        "sessions.error.not.found": "Sessao nao encontrada.",
        "sessions.error.deleting": "Falha ao excluir sessao.",
        "sessions.error.updating": "Falha ao atualizar sessao.",
        "sessions.error.rename.failed": "Nao foi possivel renomear a sessao. O titulo pode estar vazio ou a sessao nao existe mais.",
        "sessions.error.renaming": "Falha ao renomear sessao.",
        "error.database": "O banco de sessoes esta indisponivel ({context}). Tente novamente.",
        "error.timeout": "A solicitacao expirou ({context}). Tente novamente.",
        "error.connection": "Nao foi possivel acessar o armazenamento de sessoes ({context}).",
        "error.not.found": "O item solicitado nao foi encontrado ({context}).",
        "error.validation": "Entrada invalida ({context}).",
    },
    Locale.ES: {
        "sessions.error.loading": "No se pudieron cargar las sesiones.",
        "sessions.error.not.found": "Sesion no encontrada.",
        "sessions.error.deleting": "No se pudo eliminar la sesion.",
        "sessions.error.updating": "No se pudo actualizar la sesion.",
        "sessions.error.rename.failed": "No se pudo renombrar la sesion. El titulo puede estar vacio o la sesion ya no existe.",
        "sessions.error.renaming": "No se pudo renombrar la sesion.",
        "error.database": "La base de datos de sesiones no esta disponible ({context}). Intentalo de nuevo.",
        "error.timeout": "La solicitud excedio el tiempo de espera ({context}). Intentalo de nuevo.",
        "error.connection": "No se pudo acceder al almacen de sesiones ({context}).",
        "error.not.found": "No se encontro el elemento solicitado ({context}).",
        "error.validation": "Entrada no valida ({context}).",
    },
    Locale.FR: {
        "sessions.error.loading": "Impossible de charger les sessions.",
        "sessions.error.not.found": "Session introuvable.",
        "sessions.error.deleting": "Impossible de supprimer la session.",
        "sessions.error.updating": "Impossible de mettre a jour la session.",
        "sessions.error.rename.failed": "Impossible de renommer la session. Le titre est peut-etre vide ou la session n'existe plus.",
        "sessions.error.renaming": "Impossible de renommer la session.",
        "error.database": "La base de sessions est indisponible ({context}). Veuillez reessayer.",
        "error.timeout": "La requete a expire ({context}). Veuillez reessayer.",
        "error.connection": "Impossible de joindre le stockage des sessions ({context}).",
        "error.not.found": "L'element demande est introuvable ({context}).",
        "error.validation": "Saisie invalide ({context}).",
    },
    Locale.DE: {
        "sessions.error.loading": "Sitzungen konnten nicht geladen werden.",
        "sessions.error.not.found": "Sitzung nicht gefunden.",
        "sessions.error.deleting": "Sitzung konnte nicht geloscht werden.",
        "sessions.error.updating": "Sitzung konnte nicht aktualisiert werden.",
        "sessions.error.rename.failed": "Sitzung konnte nicht umbenannt werden. Der Titel ist leer oder die Sitzung existiert nicht mehr.",
        "sessions.error.renaming": "Sitzung konnte nicht umbenannt werden.",
        "error.database": "Die Sitzungsdatenbank ist nicht erreichbar ({context}). Bitte erneut versuchen.",
        "error.timeout": "Zeituberschreitung der Anfrage ({context}). Bitte erneut versuchen.",
        "error.connection": "Der Sitzungsspeicher ist nicht erreichbar ({context}).",
        "error.not.found": "Das angeforderte Element wurde nicht gefunden ({context}).",
        "error.validation": "Ungultige Eingabe ({context}).",
    },
}


# --- Public API ---------------------------------------------------------------


def all_keys() -> set[str]:
    """Keys defined for the reference locale (English)."""
    return set(_STRINGS[Locale.EN])


class LocalizedStrings:
    """String lookup bound to one locale.

    Consumed by the controller and the error translator through the
    StringLookup protocol, so tests can swap in a dict-backed fake.
    """

    def __init__(self, locale: Locale = Locale.EN):
        self.locale = locale

    def get_string(self, key: str) -> str:
        table = _STRINGS.get(self.locale, {})
        if key in table:
            return table[key]
        return _STRINGS[Locale.EN].get(key, key)

    def format(self, key: str, **values: str) -> str:
        """Look up a template and substitute placeholders."""
        return self.get_string(key).format(**values)
