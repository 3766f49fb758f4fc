from pydantic import BaseModel, Field


class ImageRules(BaseModel):
    default_loading: str = "lazy"
    error_attribute: str = "data-xpc-image-error"
    error_message: str = "Image path is missing"
    unconstrained_formats: list[str] = Field(default_factory=lambda: [".svg", ".webp"])

class UrlRules(BaseModel):
    width_param: str = "width"
    height_param: str = "height"
    max_side_param: str = "maxsidesize"

class TagHelperRules(BaseModel):
    image: ImageRules = Field(default_factory=ImageRules)
    url: UrlRules = Field(default_factory=UrlRules)

class Rules(BaseModel):
    taghelpers: TagHelperRules = Field(default_factory=TagHelperRules)
