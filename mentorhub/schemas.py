from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from mentorhub.models import MENTEE, MENTOR

NON_NULLABLE_FIELDS = ('name', 'email', 'password', 'verified', 'role')


class CreateAccountInput(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=1)


class UpdateAccountInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=1)
    username: Optional[str] = None
    company: Optional[str] = None
    position: Optional[str] = None
    nationality: Optional[str] = None
    verified: Optional[bool] = None
    description: Optional[str] = None
    profile_img_url: Optional[str] = Field(None, alias='profileImgUrl')
    phone_number: Optional[str] = Field(None, alias='phoneNumber', max_length=30)
    role: Optional[Literal[MENTOR, MENTEE]] = None

    def changes(self):
        """Only the fields the caller actually sent.

        Explicit nulls are dropped for columns that cannot be null.
        """
        data = self.model_dump(exclude_unset=True)
        return {
            key: value for key, value in data.items()
            if value is not None or key not in NON_NULLABLE_FIELDS
        }


class LoginAccountInput(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class CreateSkillInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=255)
    knowledge_area_id: str = Field(..., min_length=1, alias='knowledgeAreaId')


def parse_skills(payload):
    """Accept one ``{name, knowledgeAreaId}`` object or a list of them.

    Returns ``(skills, many)`` where ``many`` tells whether a list was sent.
    """
    if isinstance(payload, list):
        return [CreateSkillInput.model_validate(item) for item in payload], True
    return [CreateSkillInput.model_validate(payload)], False
