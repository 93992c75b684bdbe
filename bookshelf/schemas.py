from pydantic import BaseModel, ConfigDict, Field, PositiveInt


class CollectionCreate(BaseModel):
    """
    Schema for saving a book to a user's collection
    """
    user_id: PositiveInt = Field(..., alias="userId", description="ID of the user")
    book_id: PositiveInt = Field(..., alias="bookId", description="ID of the book")

    model_config = ConfigDict(populate_by_name=True)


class LoginRequest(BaseModel):
    """
    Credentials for session login
    """
    username: str = Field(..., min_length=1, description="Username or email")
    password: str = Field(..., min_length=1, description="Password")
    remember: bool = Field(False, description="Keep the session after the browser closes")
