class BaseService:
    """Pass-through layer between route handlers and a repository."""

    def __init__(self, repository):
        self.repository = repository

    def all(self):
        return self.repository.all()

    def find(self, id):
        return self.repository.find(id)

    def find_or_fail(self, id):
        return self.repository.find_or_fail(id)

    def create(self, attributes: dict):
        return self.repository.create(attributes)

    def update(self, record, attributes: dict):
        return self.repository.update(record, attributes)

    def delete(self, record):
        return self.repository.delete(record)
