"""Domain error taxonomy."""


class DomainError(Exception):
    code = "E_DOMAIN"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)


class InvalidInputError(DomainError):
    code = "E_INVALID_INPUT"


class NotFoundError(DomainError):
    code = "E_NOT_FOUND"


class ProfileNotFoundError(NotFoundError):
    code = "E_PROFILE_NOT_FOUND"


class FoodNotFoundError(NotFoundError):
    code = "E_FOOD_NOT_FOUND"


class RecipeNotFoundError(NotFoundError):
    code = "E_RECIPE_NOT_FOUND"


class NonPositiveEnergyNeedError(DomainError):
    code = "E_NON_POSITIVE_TDEE"
