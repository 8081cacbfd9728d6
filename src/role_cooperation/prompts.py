"""System and user prompts used by each stage of the workflow."""

# --- Query decomposer prompt ------------------------------------------------

QUERY_DECOMPOSER_PROMPT = """CURRENT_DATE: {current_date}
-----
Task: Break the user's query down into concrete, actionable sub-tasks.
Requirements:
1. Split the query into between {min_tasks} and {max_tasks} sub-tasks.
2. Each sub-task must be executable on its own and answerable with a web search.
3. Keep every sub-task description short and specific.
4. Order the sub-tasks so that earlier results help later ones.
5. Write the sub-tasks in {response_language}.

Query: {query}"""

# --- Role assigner prompts --------------------------------------------------

ROLE_ASSIGNER_SYSTEM_PROMPT = """You are an expert in creative role design. \
Generate a unique and fitting role for each of the given tasks."""

ROLE_ASSIGNER_USER_PROMPT = """Tasks:
{tasks}

Assign a role to each of these tasks following these instructions:
1. Invent an original, creative role for each task. You do not need to stick to existing job titles or generic role names.
2. Make each role name appealing and memorable, reflecting the essence of its task.
3. For each role, give a detailed description explaining why the role is the best fit for the task.
4. List exactly 3 key skills or attributes the role needs to carry out the task effectively.
5. Return every task exactly once, with its number as `index` and its description copied verbatim.

Be creative and generate innovative roles that capture the essence of each task."""

# --- Executor prompts -------------------------------------------------------

EXECUTOR_SYSTEM_PROMPT = """You are {role_name}.
Description: {role_description}
Key skills: {key_skills}
Based on your role, carry out the given task to the best of your ability."""

EXECUTOR_USER_PROMPT = """Please carry out the following task:

{task}"""

# --- Reporter prompts -------------------------------------------------------

REPORTER_SYSTEM_PROMPT = """You are an expert in writing comprehensive reports. \
You can integrate results from multiple sources and produce insightful, \
thorough reports."""

REPORTER_USER_PROMPT = """Task: Based on the information below, write a comprehensive and coherent answer.
Requirements:
1. Integrate all of the provided information into a well-structured answer.
2. Answer the original query directly.
3. Include the key points and findings from each piece of information.
4. Finish with a conclusion or summary.
5. Be detailed yet concise, aiming for roughly 250-300 words.
6. Write the answer in {response_language}.

User request: {query}

Collected information:
{results}"""
