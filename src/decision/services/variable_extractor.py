from typing import Dict, List, Tuple

from src.decision.interfaces.variable_extractor import VariableExtractor
from src.decision.domain.reframed_problem import ReframedProblem
from src.decision.domain.variables import VariablesAndConstraints


# Label -> keywords. Dict order is the output order.
GOAL_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "长期收入稳定性": ("收入", "工资", "薪资", "赚钱", "财务", "经济"),
    "职业发展空间": ("发展", "成长", "晋升", "职业", "前途", "机会"),
    "生活质量": ("生活", "幸福", "快乐", "舒适", "自由"),
    "身份与安全边际": ("稳定", "安全", "保障", "身份", "绿卡", "永居"),
    "技术/技能成长": ("技术", "技能", "学习", "成长", "提升"),
    "家庭和谐": ("家庭", "孩子", "父母", "配偶", "家人"),
    "社会认可": ("地位", "面子", "认可", "尊重", "成功"),
    "个人自主权": ("自由", "自主", "选择", "控制", "独立"),
}

VARIABLE_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "年龄": ("年龄", "岁", "年纪", "年轻", "老了"),
    "技能可迁移性": ("技能", "能力", "经验", "专业", "技术"),
    "资金储备": ("钱", "存款", "资金", "积蓄", "财务"),
    "语言能力": ("语言", "英语", "外语", "口语"),
    "人脉网络": ("人脉", "关系", "朋友", "圈子", "资源"),
    "行业周期": ("行业", "市场", "经济", "周期", "风口"),
    "家庭状况": ("家庭", "孩子", "配偶", "父母"),
    "健康状况": ("健康", "身体", "精力"),
    "学历背景": ("学历", "学校", "专业", "教育"),
    "工作经验": ("经验", "工作", "履历", "背景"),
}

CONSTRAINT_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "签证/政策限制": ("签证", "政策", "移民", "绿卡", "身份"),
    "资金约束": ("钱不够", "成本", "费用", "负担不起"),
    "时间窗口": ("时间", "来不及", "年龄限制", "窗口期"),
    "家庭责任": ("家庭", "孩子", "父母", "老人", "照顾"),
    "合同/承诺约束": ("合同", "竞业", "违约", "承诺"),
    "学历/资质要求": ("学历", "资质", "证书", "认证"),
    "语言门槛": ("语言", "英语", "不会"),
    "行业准入": ("准入", "门槛", "资格", "限制"),
}

UNCERTAINTY_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "政策变化": ("政策", "法规", "政府", "制度"),
    "经济周期波动": ("经济", "市场", "行情", "周期", "环境"),
    "行业发展趋势": ("行业", "技术", "趋势", "未来"),
    "个人境遇变化": ("意外", "变故", "突发", "运气"),
    "国际形势": ("国际", "关系", "形势", "地缘"),
    "技术变革": ("AI", "技术", "变革", "替代", "自动化"),
}

DEFAULT_GOALS: Tuple[str, ...] = (
    "决策的长期价值最大化",
    "风险在可承受范围内",
    "保留调整和退出的灵活性",
)

DEFAULT_VARIABLES: Tuple[str, ...] = (
    "个人能力与资源",
    "时间投入",
    "外部机会与环境",
)

DEFAULT_CONSTRAINTS: Tuple[str, ...] = (
    "可用资源（时间、金钱、精力）的有限性",
    "信息不完整性",
)

DEFAULT_UNCERTAINTIES: Tuple[str, ...] = (
    "外部环境变化",
    "个人境遇变化",
    "执行效果的不确定性",
)


def match_keywords(text: str, keyword_map: Dict[str, Tuple[str, ...]]) -> List[str]:
    """
    Return every label with at least one keyword contained in text, in map order.
    """
    return [
        label for label, keywords in keyword_map.items()
        if any(keyword in text for keyword in keywords)
    ]


def _or_default(matched: List[str], default: Tuple[str, ...]) -> List[str]:
    # Defaults replace the dimension wholesale, never mixed with matches.
    return matched if matched else list(default)


class KeywordVariableExtractor(VariableExtractor):
    """
    Substring-based extractor over four fixed keyword maps.
    Absence of matches is not a failure: each dimension falls back to defaults.
    """

    def extract(self, reframed: ReframedProblem) -> VariablesAndConstraints:
        buffer = f"{reframed.original} {reframed.reframed}"

        return VariablesAndConstraints(
            goals=_or_default(match_keywords(buffer, GOAL_KEYWORDS), DEFAULT_GOALS),
            key_variables=_or_default(match_keywords(buffer, VARIABLE_KEYWORDS), DEFAULT_VARIABLES),
            hard_constraints=_or_default(match_keywords(buffer, CONSTRAINT_KEYWORDS), DEFAULT_CONSTRAINTS),
            uncertainties=_or_default(match_keywords(buffer, UNCERTAINTY_KEYWORDS), DEFAULT_UNCERTAINTIES)
        )
