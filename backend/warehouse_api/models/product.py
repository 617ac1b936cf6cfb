"""Product mapping data models."""

from pydantic import BaseModel, ConfigDict, Field, RootModel


class MappedProduct(BaseModel):
    """Physical product that a sellable item decomposes into."""

    model_config = ConfigDict(extra="allow")

    product_name: str = Field(..., description="Physical product name used on the warehouse floor")


class ProductMappingEntry(BaseModel):
    """Mapping entry for one sellable product or kit."""

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {
                "products": [
                    {"product_name": "Scented Candle"},
                    {"product_name": "Chocolate Bar"},
                ]
            }
        },
    )

    products: list[MappedProduct] = Field(default_factory=list)


class ProductMapping(RootModel[dict[str, ProductMappingEntry]]):
    """Whole product mapping file, keyed by product or kit identifier."""

    root: dict[str, ProductMappingEntry] = Field(default_factory=dict)
