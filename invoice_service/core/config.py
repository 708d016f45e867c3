"""Application configuration via pydantic settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.invoice_models import BankDetails, CompanyInfo


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "invoice-service"
    app_version: str = "1.0.0"
    app_env: str = "development"

    api_key: Optional[str] = None
    log_level: str = "INFO"
    log_json: bool = True

    orders_api_url: Optional[str] = None
    orders_api_timeout: float = 10.0

    invoice_prefix: str = "KA"
    currency_unit: str = "Rupees"

    company_name: str = "KAUTHUK"
    company_gstin: Optional[str] = "19-TJHZOL"
    company_gst: Optional[str] = "GST:32AROPV6237K1Z4"
    company_address: Optional[str] = "Vrindavan Bypass, Mathura - 282301"
    company_phone: Optional[str] = "8077677191, 9742678903"
    company_email: Optional[str] = "sales@kauthuk.com"
    company_website: Optional[str] = "www.kauthuk.com"
    company_bank_name: Optional[str] = "Kauthuk"
    company_account_no: Optional[str] = "254075727191"
    company_ifsc: Optional[str] = "IFDK00001066"
    company_customer_id: Optional[str] = "78810207"
    company_branch: Optional[str] = "Equality Branch"
    company_declaration: Optional[str] = (
        "We declare that this invoice shows the actual price of the goods described "
        "and that all particulars are true and correct."
    )

    @property
    def company(self) -> CompanyInfo:
        return CompanyInfo(
            name=self.company_name,
            gstin=self.company_gstin,
            gst=self.company_gst,
            address=self.company_address,
            phone=self.company_phone,
            email=self.company_email,
            website=self.company_website,
            bank_details=BankDetails(
                bank_name=self.company_bank_name,
                account_no=self.company_account_no,
                ifsc=self.company_ifsc,
                customer_id=self.company_customer_id,
                branch=self.company_branch,
            ),
            declaration=self.company_declaration,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
