from pydantic import BaseModel, ConfigDict, Field


class CreateCarRequestDTO(BaseModel):
    """
    Body for a new listing.

    Only shape is checked here; field rules (year range, positive numbers,
    URL, hint length) live in NewCar.validate() so every caller gets them.
    """

    make: str = Field(..., description="Manufacturer", examples=["Toyota"])
    model: str = Field(..., description="Model name", examples=["Camry"])
    year: int = Field(..., description="Model year", examples=[2022])
    price: str = Field(
        ...,
        description="Price (decimal as string)",
        examples=["25000.00"],
        pattern=r"^\d+(\.\d{1,2})?$",
    )
    horsepower: int = Field(..., description="Engine output", examples=[203])
    mpg: float = Field(..., description="Fuel economy", examples=[32.0])
    image_url: str = Field(..., description="Photo URL", examples=["https://placehold.co/600x400.png"])
    data_ai_hint: str = Field(
        default="",
        description="Up to two keywords for image search; derived from make and model when blank",
        examples=["toyota camry"],
    )
    features: list[str] | str = Field(
        default_factory=list,
        description="Feature list, or one comma-separated string",
        examples=[["Sunroof", "Backup Camera"], "Sunroof, Backup Camera"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "make": "Toyota",
                "model": "Camry",
                "year": 2022,
                "price": "25000.00",
                "horsepower": 203,
                "mpg": 32.0,
                "image_url": "https://placehold.co/600x400.png",
                "data_ai_hint": "",
                "features": "Sunroof, Backup Camera",
            }
        }
    )


class CreateCarResponseDTO(BaseModel):
    id: str
