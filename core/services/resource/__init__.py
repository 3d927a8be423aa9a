from .service import ResourceService, as_resource_type, as_skill_category, format_resource_code

__all__ = ["ResourceService", "as_resource_type", "as_skill_category", "format_resource_code"]
