class CatalogError(Exception):
    status_code = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class CatalogValidationError(CatalogError):
    status_code = 400


class CategoryNotFoundError(CatalogError):
    status_code = 404

    def __init__(self, category: str, message: str = "Category not found"):
        self.category = category
        super().__init__(message)


class VideoNotFoundError(CatalogError):
    status_code = 404

    def __init__(self, category: str, index: int):
        self.category = category
        self.index = index
        super().__init__("Video not found")


class CategoryExistsError(CatalogError):
    status_code = 400

    def __init__(self, category: str):
        self.category = category
        super().__init__("Category already exists")


class MalformedCategoryError(CatalogError):
    status_code = 400

    def __init__(self, category: str):
        self.category = category
        super().__init__("Category record is malformed")
