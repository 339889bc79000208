import typing as t
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from tagentropy.utils.enums import AggregationPolicy, EntropyFormula


class BaseValidator(BaseModel):
    """Base validator; unknown keys of the configuration section are ignored."""
    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore")


# DataSetLoader configuration

class SideInformationConfig(BaseValidator):
    """Tag catalog configuration.

    Attributes:
        tag_path (str): Path to the item-tag file, one `itemId<TAB>tag` row per tag occurrence.
        item_path (Optional[str]): Path to a file listing catalog item ids, one per row.
        header (Optional[bool]): Whether the files include a header row; defaults to the
            `header` of the data configuration.
    """

    tag_path: str
    item_path: Optional[str] = Field(default=None)
    header: Optional[bool] = Field(default=None)


class DataLoadingConfig(BaseValidator):
    """Dataset loading configuration.

    Attributes:
        train_path (str): Path to the training interactions.
        test_path (Optional[str]): Path to the test interactions; its users are the evaluated users.
        header (bool): Whether the interaction files include a header row; default is False.
        side_information (SideInformationConfig): Tag catalog configuration.
    """

    train_path: str
    test_path: Optional[str] = Field(default=None)
    header: bool = Field(default=False)
    side_information: SideInformationConfig

    @field_validator("side_information", mode="before")
    @classmethod
    def namespace_to_dict(cls, value):
        if hasattr(value, "__dict__") and not isinstance(value, (dict, BaseModel)):
            return vars(value)
        return value

    @model_validator(mode="after")
    def inherit_header(self) -> "DataLoadingConfig":
        """Use the interaction `header` for the tag files when they do not set their own.

        Returns:
            DataLoadingConfig: The configuration object itself.
        """
        if self.side_information.header is None:
            self.side_information.header = self.header
        return self


# Evaluator configuration

class EvaluationConfig(BaseValidator):
    """Evaluation configuration.

    Attributes:
        simple_metrics (List[str]): Names of the metrics to compute.
        cutoffs (List[int]): Recommendation list sizes; each one must be at least 1.
        aggregation (AggregationPolicy): How degraded users enter the aggregate; default is `lenient`.
        entropy_formula (EntropyFormula): Tag entropy reduction; default is `scalar`.
        paired_ttest (bool): Whether to compute paired t-tests between models; default is False.
        wilcoxon_test (bool): Whether to compute Wilcoxon tests between models; default is False.
    """

    simple_metrics: t.List[str] = Field(default_factory=lambda: ["TagEntropy"])
    cutoffs: t.List[int] = Field(default_factory=list)
    aggregation: AggregationPolicy = AggregationPolicy.LENIENT
    entropy_formula: EntropyFormula = EntropyFormula.SCALAR
    paired_ttest: bool = False
    wilcoxon_test: bool = False

    @field_validator("cutoffs", mode="before")
    @classmethod
    def cutoffs_as_list(cls, value):
        if value is None:
            return []
        return value if isinstance(value, (list, tuple)) else [value]

    @field_validator("paired_ttest", "wilcoxon_test", mode="before")
    @classmethod
    def empty_as_false(cls, value):
        # Unset statistical tests come through the namespace as empty dicts
        return False if value in ({}, None) else value

    @model_validator(mode="after")
    def validate_cutoffs(self) -> "EvaluationConfig":
        """Ensure every cutoff is a positive list size.

        Returns:
            EvaluationConfig: The configuration object itself.
        """
        for k in self.cutoffs:
            if k < 1:
                raise ValueError(f"Attribute `cutoffs` must contain positive values, got {k}.")
        return self


def check_cutoffs(cutoffs: t.List[int], top_k: int):
    """Check that no cutoff exceeds the stored recommendation list length.

    Args:
        cutoffs (List[int]): Requested list sizes.
        top_k (int): Length of the stored recommendation lists.

    Raises:
        ValueError: If any cutoff is greater than `top_k`.
    """
    if any(k > top_k for k in cutoffs):
        raise ValueError("Cutoff values must be smaller than recommendation list length (top_k)")
