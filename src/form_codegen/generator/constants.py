"""
Constants for the form code generator.

Fixed fragments of the generated Vue/Element Plus component: the form
wrapper, the submit trailer, the submit handler and the style block, plus
the literal texts and defaults used when a descriptor leaves them out.
"""

# Placeholder and rule-message prefixes, followed by the field label
ENTER_PREFIX = "please enter "
SELECT_PREFIX = "please select "

# Bounds used when a number field omits min/max
DEFAULT_NUMBER_MIN = 0
DEFAULT_NUMBER_MAX = 1000

TEMPLATE_HEADER = [
    "<template>",
    "  <el-form",
    '    ref="form"',
    '    :model="formData"',
    '    :rules="rules"',
    '    label-width="100px">',
]

TEMPLATE_FOOTER = [
    "    <el-form-item>",
    '      <el-button type="primary" @click="handleSubmit">Submit</el-button>',
    "    </el-form-item>",
    "  </el-form>",
    "</template>",
]

SCRIPT_HEADER = [
    '<script setup lang="ts">',
    "import { ref, reactive } from 'vue';",
    "import { ElMessage, ElForm } from 'element-plus';",
    "",
]

SUBMIT_HANDLER = [
    "// Form reference",
    "const form = ref<InstanceType<typeof ElForm> | null>(null);",
    "",
    "// Submit form",
    "const handleSubmit = () => {",
    "  if (!form.value) return;",
    "  form.value.validate((valid) => {",
    "    if (valid) {",
    "      ElMessage.success('Submitted successfully');",
    "      console.log('Form data:', formData);",
    "    } else {",
    "      ElMessage.error('Please complete the form');",
    "      return false;",
    "    }",
    "  });",
    "};",
    "</script>",
]

STYLE_BLOCK = [
    "<style scoped>",
    ".el-form {",
    "  max-width: 600px;",
    "  margin: 20px auto;",
    "  padding: 20px;",
    "  border: 1px solid #e6e6e6;",
    "  border-radius: 4px;",
    "}",
    ".el-form-item {",
    "  margin-bottom: 15px;",
    "}",
    "</style>",
]
