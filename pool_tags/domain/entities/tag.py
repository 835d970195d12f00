from __future__ import annotations

from dataclasses import dataclass


CONTRACT_ADDRESS = "Contract Address"
PUBLIC_NAME_TAG = "Public Name Tag"
PROJECT_NAME = "Project Name"
UI_WEBSITE_LINK = "UI/Website Link"
PUBLIC_NOTE = "Public Note"


@dataclass(frozen=True)
class Tag:
    contract_address: str
    public_name_tag: str
    project_name: str
    ui_website_link: str
    public_note: str

    def as_record(self) -> dict[str, str]:
        return {
            CONTRACT_ADDRESS: self.contract_address,
            PUBLIC_NAME_TAG: self.public_name_tag,
            PROJECT_NAME: self.project_name,
            UI_WEBSITE_LINK: self.ui_website_link,
            PUBLIC_NOTE: self.public_note,
        }
