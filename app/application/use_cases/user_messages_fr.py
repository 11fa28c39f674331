"""French user-facing messages for the intake form and endpoint."""


class UserMessagesFR:
    """Centralized French user-facing messages."""

    # Step validation
    STEP_CATEGORIES = "Veuillez choisir au moins une catégorie."
    STEP_NAME = "Veuillez saisir votre nom."
    STEP_PHONE = "Veuillez saisir un numéro de téléphone valide."
    STEP_LOCALISATION = "Veuillez choisir une localisation valide (code postal + ville)."
    STEP_BUDGET = "Veuillez sélectionner un budget estimé."
    STEP_DEFAULT = "Veuillez compléter cette étape."

    # Anti-abuse
    TOO_FAST = "Veuillez patienter un instant avant d’envoyer le formulaire."
    THROTTLED = "Veuillez attendre quelques secondes avant un nouvel envoi."
    SUBMITTING = "Envoi en cours, veuillez patienter."

    @staticmethod
    def cooldown(seconds: int) -> str:
        """Generate the rate-limit countdown message."""
        unit = "seconde" if seconds <= 1 else "secondes"
        return f"Trop de demandes. Réessayez dans {seconds} {unit}."

    # Endpoint validation
    REQUIRED_FIELDS = "Veuillez remplir les champs obligatoires."
    SELECT_CATEGORY = "Veuillez sélectionner une catégorie."
    INVALID_PHONE = "Le numéro de téléphone doit contenir 10 chiffres."
    INVALID_POSTAL = "Le code postal doit contenir 5 chiffres."
    RATE_LIMITED = "Trop de demandes. Veuillez réessayer plus tard."

    # Infrastructure errors
    DB_ERROR = "Erreur serveur DB. Réessayez."
    SERVER_ERROR = "Erreur serveur. Réessayez."

    # Address lookup
    LOCATION_UNAVAILABLE = (
        "Localisation non disponible. Activez le GPS ou saisissez votre code postal."
    )
    LOCATION_NOT_FOUND = "Localisation non disponible. Essayez la recherche manuelle."
    GPS_ERROR = "Erreur GPS. Essayez la recherche manuelle."
