from pydantic import BaseModel, Field


class InsertResult(BaseModel):
    acknowledged: bool = True
    inserted_id: int = Field(alias="insertedId")

    model_config = {"populate_by_name": True}


class UserInsertResult(BaseModel):
    success: bool = True
    inserted_id: int = Field(alias="insertedId")

    model_config = {"populate_by_name": True}


class Message(BaseModel):
    message: str


class ModifiedResult(BaseModel):
    modified_count: int = Field(alias="modifiedCount")

    model_config = {"populate_by_name": True}


class DeleteResult(BaseModel):
    message: str
    deleted_count: int = Field(alias="deletedCount")

    model_config = {"populate_by_name": True}
