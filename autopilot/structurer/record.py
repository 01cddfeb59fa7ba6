"""
The structured record built from one analysis reply.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalysisRecord:
    """Result of parsing one model reply. Every field is always present."""
    project_name: str = ""
    tech_stack: tuple[str, ...] = ()
    project_ideas: tuple[str, ...] = ()
    folder_structure_analysis: str = ""
    summary: str = ""

    def to_dict(self) -> dict:
        """Serialize with the camelCase keys used by the report format."""
        return {
            "projectName": self.project_name,
            "techStack": list(self.tech_stack),
            "projectIdeas": list(self.project_ideas),
            "folderStructureAnalysis": self.folder_structure_analysis,
            "summary": self.summary,
        }
