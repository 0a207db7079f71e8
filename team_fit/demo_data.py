"""Demo consulting projects with four-person teams.

Each project carries RFP text, a curated requirement list and a team whose
skills and MBTI types make the dashboard charts meaningful out of the box.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from team_fit.mbti_types import TeamMember
from team_fit.project_models import Project
from team_fit.project_repository import ProjectRepository


class DemoProject(BaseModel):
    name: str
    client_company: str
    rfp_content: str
    requirements: list[str] = Field(min_length=1)
    members: list[TeamMember] = Field(min_length=1)


# ---------------------------------------------------------------------------
# Demo projects
# ---------------------------------------------------------------------------
DEMO_PROJECTS: list[DemoProject] = [
    DemoProject(
        name="📊 글로벌 제조업체 디지털 전환 전략",
        client_company="Global Manufacturing Corp",
        rfp_content=(
            "전통적인 제조 공정을 Industry 4.0 기반으로 전환하는 디지털 혁신 컨설팅 프로젝트입니다.\n\n"
            "주요 컨설팅 영역:\n"
            "- 현재 업무 프로세스 분석 및 최적화\n"
            "- IoT/AI 기반 스마트 팩토리 구축 전략\n"
            "- 데이터 기반 의사결정 체계 수립\n"
            "- 디지털 전환 로드맵 및 투자 계획\n"
            "- 조직 변화 관리 및 교육 프로그램\n"
            "- ROI 분석 및 성과 측정 지표 개발\n\n"
            "프로젝트 규모: 12개월, 30억원"
        ),
        requirements=[
            "디지털 전환", "Industry 4.0", "프로세스 최적화", "변화관리",
            "IoT/AI 전략", "데이터 분석", "조직 컨설팅", "ROI 분석",
        ],
        members=[
            TeamMember(id="d1", name="김민수", role="디지털 전환 컨설턴트", mbti="ENTJ",
                       skills_extracted="Industry 4.0, IoT 전략, 디지털 혁신, 프로세스 리엔지니어링",
                       experience_summary="8년 제조업 디지털 전환, 대기업 스마트 팩토리 구축 15건"),
            TeamMember(id="d2", name="이수정", role="데이터 분석 전문가", mbti="INTJ",
                       skills_extracted="빅데이터 분석, AI/ML, 통계 모델링, 데이터 시각화",
                       experience_summary="6년 데이터 컨설팅, 제조 데이터 분석 전문"),
            TeamMember(id="d3", name="박영호", role="변화관리 컨설턴트", mbti="ENFJ",
                       skills_extracted="조직 변화관리, 교육 프로그램 설계, 커뮤니케이션 전략",
                       experience_summary="10년 조직 컨설팅, 대규모 변화관리 프로젝트 20건"),
            TeamMember(id="d4", name="최혜진", role="프로세스 혁신 전문가", mbti="ISTJ",
                       skills_extracted="프로세스 분석, 업무 최적화, 성과측정, 품질관리",
                       experience_summary="7년 프로세스 컨설팅, 제조업 효율성 개선 전문"),
        ],
    ),
    DemoProject(
        name="🏦 금융사 ESG 경영 컨설팅",
        client_company="Korea Financial Group",
        rfp_content=(
            "ESG(환경·사회·지배구조) 경영 체계 구축 및 지속가능경영 전략 수립 컨설팅입니다.\n\n"
            "컨설팅 범위:\n"
            "- ESG 현황 진단 및 Gap 분석\n"
            "- 탄소중립 실행 계획 개발\n"
            "- 사회적 가치 창출 프로그램 설계\n"
            "- 지배구조 개선 방안\n"
            "- ESG 성과지표(KPI) 체계 구축\n"
            "- 이해관계자 소통 전략\n\n"
            "프로젝트 기간: 8개월"
        ),
        requirements=[
            "ESG 경영", "지속가능경영", "탄소중립", "사회적 가치",
            "지배구조", "성과관리", "이해관계자 관리", "금융업 도메인",
        ],
        members=[
            TeamMember(id="e1", name="정다영", role="ESG 전략 컨설턴트", mbti="INFJ",
                       skills_extracted="ESG 전략, 지속가능경영, 탄소중립, 사회적 가치",
                       experience_summary="5년 ESG 컨설팅, 금융권 ESG 체계 구축 전문"),
            TeamMember(id="e2", name="송준혁", role="환경경영 전문가", mbti="INTP",
                       skills_extracted="탄소배출 분석, 환경 리스크 관리, 녹색금융, 기후변화 대응",
                       experience_summary="8년 환경 컨설팅, 탄소중립 로드맵 수립 12건"),
            TeamMember(id="e3", name="한소라", role="사회적 가치 컨설턴트", mbti="ESFP",
                       skills_extracted="사회공헌, 이해관계자 관리, 사회적 임팩트 측정",
                       experience_summary="6년 CSV 컨설팅, 사회적 가치 프로그램 설계 전문"),
            TeamMember(id="e4", name="윤재영", role="지배구조 전문가", mbti="ESTJ",
                       skills_extracted="기업지배구조, 컴플라이언스, 위험관리, 내부통제",
                       experience_summary="12년 지배구조 컨설팅, 금융권 거버넌스 구축 경험"),
        ],
    ),
    DemoProject(
        name="🚀 스타트업 성장 전략 및 투자 유치",
        client_company="TechStart Ventures",
        rfp_content=(
            "AI 기반 핀테크 스타트업의 Series A 투자 유치 및 글로벌 진출 전략 컨설팅입니다.\n\n"
            "컨설팅 서비스:\n"
            "- 비즈니스 모델 검증 및 개선\n"
            "- 시장 분석 및 경쟁사 벤치마킹\n"
            "- 재무 모델링 및 투자 계획 수립\n"
            "- 투자 유치 전략 및 IR 자료 제작\n"
            "- 글로벌 진출 시장 분석\n\n"
            "목표: Series A 300억원 투자 유치"
        ),
        requirements=[
            "스타트업 전략", "투자유치", "비즈니스 모델", "시장분석",
            "재무모델링", "글로벌 진출", "핀테크", "IR 전략",
        ],
        members=[
            TeamMember(id="s1", name="임창민", role="경영전략 컨설턴트", mbti="ENTP",
                       skills_extracted="사업전략, 비즈니스 모델, 시장분석, 경쟁전략",
                       experience_summary="9년 전략 컨설팅, 스타트업 성장 전략 수립 30건"),
            TeamMember(id="s2", name="강은영", role="투자유치 전문가", mbti="ENFP",
                       skills_extracted="투자유치, 재무모델링, IR 전략, 밸류에이션",
                       experience_summary="7년 투자 컨설팅, 총 500억 투자유치 성공"),
            TeamMember(id="s3", name="조성혁", role="시장진출 전문가", mbti="ESTP",
                       skills_extracted="글로벌 진출, 해외시장 분석, 파트너십, 현지화 전략",
                       experience_summary="8년 해외진출 컨설팅, 동남아 시장 진출 전문"),
            TeamMember(id="s4", name="김나리", role="핀테크 도메인 전문가", mbti="ISFJ",
                       skills_extracted="핀테크 트렌드, 금융 규제, 블록체인, 결제 시스템",
                       experience_summary="6년 핀테크 컨설팅, 디지털 금융 서비스 기획 전문"),
        ],
    ),
]


def seed_demo_data(repo: ProjectRepository) -> list[Project]:
    """Write every demo project and its team into *repo*.

    Returns:
        The created projects, with summary and requirements filled in.
    """
    created: list[Project] = []
    for demo in DEMO_PROJECTS:
        project = repo.create_project(
            name=demo.name,
            client_company=demo.client_company,
            rfp_content=demo.rfp_content,
        )
        project = repo.update_project_analysis(
            project.id,
            rfp_summary=demo.rfp_content.split("\n")[0] + "...",
            requirements=demo.requirements,
        )
        for member in demo.members:
            repo.add_member(
                project.id,
                name=member.name,
                role=member.role,
                mbti=member.mbti,
                skills_extracted=member.skills_extracted,
                experience_summary=member.experience_summary,
            )
        created.append(project)
    return created
