"""팀 적합도 분석 - Team Fit Advisor

A Streamlit app for registering consulting projects from RFP text and judging
how well a team fits them. Team analysis lives on the dashboard page.
"""

import logging
import os

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

from team_fit.ai_service import RfpAnalyzer
from team_fit.demo_data import seed_demo_data
from team_fit.llm_config import get_available_llms
from team_fit.project_repository import ProjectRepository


# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------

def render_sidebar(repo: ProjectRepository) -> None:
    with st.sidebar:
        st.header("⚙️ 설정")

        st.subheader("모델 구성")
        available_llms = get_available_llms()
        st.caption(f"기본 모델: **{os.getenv('OPENAI_MODEL_NAME', '미설정')}**")
        st.caption(f"기본 엔드포인트: `{os.getenv('OPENAI_BASE_URL', '미설정')}`")
        if any(label == "OpenRouter" for label, _ in available_llms):
            st.caption(f"보조 모델: **OpenRouter/{os.getenv('OPENROUTER_MODEL_NAME', '')}** ✅")
        else:
            st.caption("보조 모델: 미설정 ❌")
        if not available_llms:
            st.warning("⚠️ 사용 가능한 모델이 없습니다. 키워드 분석으로 대체합니다.")

        st.divider()
        st.subheader("데모 데이터")
        if st.button("🎲 데모 프로젝트 생성", use_container_width=True):
            try:
                created = seed_demo_data(repo)
                st.success(f"데모 프로젝트 {len(created)}개를 생성했습니다.")
                st.rerun()
            except ValueError as e:
                st.error(f"데모 데이터 생성 실패: {e}")

        if st.button("🗑️ 전체 초기화", use_container_width=True):
            if st.session_state.get("confirm_reset"):
                repo.reset()
                st.session_state.confirm_reset = False
                st.session_state.selected_project_id = None
                st.success("모든 데이터를 삭제했습니다.")
                st.rerun()
            else:
                st.session_state.confirm_reset = True
                st.warning("다시 클릭하면 초기화됩니다.")


# ---------------------------------------------------------------------------
# Project creation
# ---------------------------------------------------------------------------

def render_create_form(repo: ProjectRepository) -> None:
    with st.expander("➕ 새 프로젝트", expanded=False):
        with st.form("create_project"):
            name = st.text_input("프로젝트 이름", max_chars=200)
            client_company = st.text_input("고객사")
            rfp_content = st.text_area("RFP 내용", height=200)
            submitted = st.form_submit_button("생성 및 RFP 분석", type="primary")

        if not submitted:
            return
        if not name.strip():
            st.error("프로젝트 이름을 입력하세요.")
            return

        try:
            project = repo.create_project(
                name=name.strip(),
                client_company=client_company.strip(),
                rfp_content=rfp_content.strip(),
            )
            if rfp_content.strip():
                llms = get_available_llms()
                analyzer = RfpAnalyzer(llms[0][1] if llms else None)
                with st.spinner("RFP 분석 중..."):
                    analysis = analyzer.analyze(rfp_content.strip())
                repo.update_project_analysis(project.id, analysis.summary, analysis.requirements)
                logger.info("RFP analyzed via %s: %d requirements", analysis.source, len(analysis.requirements))
        except ValueError as e:
            st.error(f"프로젝트 생성 실패: {e}")
            return

        st.session_state.selected_project_id = project.id
        st.success(f"'{project.name}' 프로젝트를 생성했습니다.")
        st.rerun()


# ---------------------------------------------------------------------------
# Project list
# ---------------------------------------------------------------------------

def render_project_list(repo: ProjectRepository) -> None:
    try:
        projects = repo.list_projects()
    except ValueError as e:
        st.error(f"데이터 로드 실패: {e}")
        st.stop()

    if not projects:
        st.info("💡 프로젝트가 없습니다. 새 프로젝트를 만들거나 사이드바에서 데모 데이터를 생성하세요.")
        return

    st.subheader(f"프로젝트 목록 ({len(projects)})")
    for project in projects:
        members = repo.list_members(project.id)
        latest = repo.latest_analysis(project.id)
        with st.container(border=True):
            col1, col2, col3 = st.columns([4, 1, 1])
            with col1:
                st.markdown(f"**{project.name}**")
                st.caption(f"{project.client_company or '고객사 미지정'} · 팀원 {len(members)}명")
                if project.rfp_summary:
                    st.write(project.rfp_summary)
                if project.requirements:
                    st.caption(" · ".join(project.requirements))
            with col2:
                if latest is not None:
                    st.metric("적합도", f"{latest.overall_fit_score}점")
                else:
                    st.metric("적합도", "-")
            with col3:
                if st.button("📊 분석", key=f"open_{project.id}", use_container_width=True):
                    st.session_state.selected_project_id = project.id
                    st.switch_page("pages/1_📊_팀_분석_대시보드.py")
                if st.button("🗑️ 삭제", key=f"delete_{project.id}", use_container_width=True):
                    repo.delete_project(project.id)
                    if st.session_state.get("selected_project_id") == project.id:
                        st.session_state.selected_project_id = None
                    st.rerun()


# ---------------------------------------------------------------------------
# Streamlit UI
# ---------------------------------------------------------------------------

def main():
    st.set_page_config(
        page_title="팀 적합도 분석",
        page_icon="🧩",
        layout="wide",
    )

    st.title("🧩 팀 적합도 분석")
    st.caption("RFP 기반 요구사항 추출과 MBTI 케미스트리로 컨설팅 팀 구성을 평가합니다")

    if "selected_project_id" not in st.session_state:
        st.session_state.selected_project_id = None
    if "confirm_reset" not in st.session_state:
        st.session_state.confirm_reset = False

    repo = ProjectRepository()
    render_sidebar(repo)
    render_create_form(repo)
    st.divider()
    render_project_list(repo)


if __name__ == "__main__":
    main()
