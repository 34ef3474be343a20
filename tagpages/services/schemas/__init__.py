from tagpages.services.schemas.paginator import PaginatorRead, PostRead

__all__ = ["PaginatorRead", "PostRead"]
